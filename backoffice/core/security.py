"""
HTTP basic authentication for the back-office pages.

One employee account, configured through ADMIN_USERNAME / ADMIN_PASSWORD.
"""

import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from backoffice.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

basic_auth = HTTPBasic(realm="Back office")


def credentials_match(credentials: HTTPBasicCredentials, settings: Settings) -> bool:
    username_ok = secrets.compare_digest(credentials.username.encode(), settings.ADMIN_USERNAME.encode())
    password_ok = secrets.compare_digest(credentials.password.encode(), settings.ADMIN_PASSWORD.encode())
    return username_ok and password_ok


def get_current_employee(credentials: HTTPBasicCredentials = Depends(basic_auth)) -> str:
    """Name of the logged-in employee; 401 when the credentials are wrong"""
    if not credentials_match(credentials, get_settings()):
        logger.warning("Rejected back-office login for %r", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username


def require_auth():
    """Usage: app.include_router(router, dependencies=[require_auth()])"""
    return Depends(get_current_employee)
