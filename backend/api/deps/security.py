"""
Admin authentication.

HTTP Basic credentials checked in constant time against the configured
admin username and password.

Dependencies: fastapi.security, backend.configs.admin
System role: Guard for upload and admin routes
"""

import logging
import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

from backend.api.deps.dependencies import get_admin_settings
from backend.configs.admin import AdminSettings

logger = logging.getLogger(__name__)

security = HTTPBasic(auto_error=False)


def require_admin(
    credentials: HTTPBasicCredentials | None = Depends(security),
    admin: AdminSettings = Depends(get_admin_settings),
) -> str:
    """
    Require valid admin credentials.

    Returns:
        str: Authenticated username

    Raises:
        HTTPException(401): Credentials missing or wrong
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Basic"},
        )

    username_ok = secrets.compare_digest(
        credentials.username.encode("utf-8"), admin.username.encode("utf-8")
    )
    password_ok = secrets.compare_digest(
        credentials.password.encode("utf-8"), admin.password.encode("utf-8")
    )
    if not (username_ok and password_ok):
        logger.warning(f"{__name__}:require_admin - Rejected credentials for user={credentials.username!r}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
