import hmac
import logging
from typing import Optional

from fastapi import Depends, Header, HTTPException, status

from apps.admin_api.core.config import settings

logger = logging.getLogger(__name__)

DEMO_ADMIN = {"id": "demo-admin", "role": "admin"}


async def get_current_user(x_admin_token: Optional[str] = Header(default=None)):
    """
    Soft-mode authentication:
    - With no ADMIN_API_TOKEN configured, returns the demo admin
    - Otherwise the X-Admin-Token header must match the configured token

    Returns None when no credentials were supplied.
    """
    expected = settings.ADMIN_API_TOKEN
    if not expected:
        return DEMO_ADMIN

    if x_admin_token is None:
        return None

    if not hmac.compare_digest(x_admin_token.encode(), expected.encode()):
        logger.warning("Rejected admin request with invalid token")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid admin token")

    return {"id": "token-admin", "role": "admin"}


async def require_admin(user=Depends(get_current_user)):
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Admin credentials required",
        )
    return user


# Applied in order to every admin route before the handler runs
ADMIN_GUARDS = [require_admin]
