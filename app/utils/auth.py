import hmac
import logging
from functools import wraps
from typing import Optional

from flask import current_app, request

from ..services.countdown.errors import AuthError

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(header_value: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header.

    Args:
        header_value: Raw Authorization header, may be None

    Returns:
        The token, or None when the header is missing or not a bearer header
    """
    if not header_value or not header_value.startswith(BEARER_PREFIX):
        return None
    return header_value[len(BEARER_PREFIX):]


def check_api_key(header_value: Optional[str], api_key: Optional[str]) -> None:
    """
    Verify a bearer token against the configured API key.

    An unset or empty API key disables the check and every request passes.

    Raises:
        AuthError: If a key is configured and the token is missing or wrong
    """
    if not api_key:
        return
    token = extract_bearer_token(header_value)
    if token is None or not hmac.compare_digest(token.encode(), api_key.encode()):
        raise AuthError("Unauthorized")


def require_api_key(view):
    """Reject requests whose bearer token doesn't match RENDER_API_KEY."""
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            check_api_key(request.headers.get("Authorization"), current_app.config.get("RENDER_API_KEY"))
        except AuthError as e:
            logger.warning(f"Rejected {request.method} {request.path} from {request.remote_addr}: {e.message}")
            return e.message, e.status_code, {"Content-Type": "text/plain; charset=utf-8"}
        return view(*args, **kwargs)
    return wrapper
