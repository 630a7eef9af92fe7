import logging
import secrets
from typing import Optional

from fastapi import Depends, Header, Request

from inventory.api.deps import get_settings
from inventory.config import Settings
from inventory.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


def is_admin_token_valid(supplied: Optional[str], expected: Optional[str]) -> bool:
    """Constant-time comparison; an unconfigured secret never matches."""
    if not expected or supplied is None:
        return False
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


async def require_admin_token(
    request: Request,
    admin_token: Optional[str] = Header(None, alias="admin-token"),
    settings: Settings = Depends(get_settings),
) -> None:
    """Dependency guarding destructive admin routes."""
    if not is_admin_token_valid(admin_token, settings.security_key):
        logger.warning("Rejected admin request to %s from %s", request.url.path,
                       request.client.host if request.client else "unknown")
        raise AuthorizationError()
