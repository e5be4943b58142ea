from datetime import datetime
from pathlib import Path
from fastapi.templating import Jinja2Templates

from backoffice.core.config import get_settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

# Initialize templates once
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["now"] = datetime.utcnow
templates.env.globals["shop_name"] = get_settings().SHOP_NAME
