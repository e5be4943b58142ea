# tests/ui/helpers.py
"""Browser setup for the back-office UI campaign."""
import logging
from urllib.parse import quote, urlsplit, urlunsplit

from selenium import webdriver
from selenium.webdriver.chrome.service import Service
from webdriver_manager.chrome import ChromeDriverManager

from backoffice.core.config import Settings

logger = logging.getLogger(__name__)


def create_browser(settings: Settings) -> webdriver.Remote:
    """
    Chrome driver for the campaign.

    Uses the Selenium Grid at SELENIUM_GRID_URL when set, otherwise a local
    Chrome with a driver fetched by webdriver-manager.
    """
    options = webdriver.ChromeOptions()
    if settings.SELENIUM_HEADLESS:
        options.add_argument("--headless=new")
    options.add_argument("--no-sandbox")
    options.add_argument("--disable-dev-shm-usage")
    options.add_argument("--window-size=1920,1080")

    selenium_grid_url = settings.SELENIUM_GRID_URL
    if selenium_grid_url:
        if not selenium_grid_url.startswith('http'):
            selenium_grid_url = f"http://{selenium_grid_url}"
        if not selenium_grid_url.endswith('/wd/hub'):
            selenium_grid_url = f"{selenium_grid_url}/wd/hub"
        logger.info(f"Using remote Selenium Grid at: {selenium_grid_url}")
        driver = webdriver.Remote(command_executor=selenium_grid_url, options=options)
    else:
        driver = webdriver.Chrome(service=Service(ChromeDriverManager().install()), options=options)

    driver.implicitly_wait(0)
    return driver


def authenticated_url(base_url: str, username: str, password: str, path: str = "/") -> str:
    """Back-office URL carrying the HTTP basic credentials"""
    parts = urlsplit(base_url.rstrip("/"))
    netloc = f"{quote(username, safe='')}:{quote(password, safe='')}@{parts.hostname}"
    if parts.port:
        netloc = f"{netloc}:{parts.port}"
    return urlunsplit((parts.scheme, netloc, parts.path + path, "", ""))
