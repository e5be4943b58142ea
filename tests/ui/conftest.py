# tests/ui/conftest.py
"""
Fixtures for the browser campaign.

The campaign drives a running back office: set BO_URL (and ADMIN_USERNAME /
ADMIN_PASSWORD) in the environment, load the demo data with
`backoffice-seed-demo`, then run `pytest -m ui`. Without BO_URL every test in
this directory is skipped.
"""
import pytest

from backoffice.core.config import get_settings
from tests.ui.helpers import authenticated_url, create_browser
from tests.ui.pages.dashboard import DashboardPage
from tests.ui.pages.orders import OrdersPage


def pytest_collection_modifyitems(config, items):
    settings = get_settings()
    skip_ui = pytest.mark.skip(reason="BO_URL not set in environment")
    for item in items:
        if "tests/ui/" not in item.nodeid:
            continue
        item.add_marker(pytest.mark.ui)
        if not settings.BO_URL:
            item.add_marker(skip_ui)


@pytest.fixture(scope="module")
def ui_settings():
    return get_settings()


@pytest.fixture(scope="module")
def browser(ui_settings):
    driver = create_browser(ui_settings)
    yield driver
    driver.quit()


@pytest.fixture(scope="module")
def dashboard_page(browser, ui_settings):
    """Logged-in back office, on the dashboard"""
    page = DashboardPage(browser, timeout=ui_settings.SELENIUM_TIMEOUT)
    page.goto(authenticated_url(ui_settings.BO_URL, ui_settings.ADMIN_USERNAME, ui_settings.ADMIN_PASSWORD))
    return page


@pytest.fixture(scope="module")
def orders_page(browser, ui_settings):
    return OrdersPage(browser, timeout=ui_settings.SELENIUM_TIMEOUT)
