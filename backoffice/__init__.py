"""Shop back office: catalog stock editing, product form data and the orders grid."""
from dotenv import load_dotenv

__version__ = "0.1.0"

# .env values never override variables already set in the environment
load_dotenv()
