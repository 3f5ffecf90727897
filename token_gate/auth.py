"""
Master token handling shared by the checkpoint service and the gateway.
"""

import logging

from token_gate.http import Request

logger = logging.getLogger(__name__)

# Request header checked by the gateway
MASTER_TOKEN_HEADER = "Master-Token"

# Response header and value handed out by the checkpoint on login
MASTER_TOKEN_RESPONSE_HEADER = "master_token"
MASTER_TOKEN_VALUE = "super_secret"


def is_authorized(request: Request) -> bool:
    """
    Checks whether the request carries the master token header.

    Only presence is checked. Any value, an empty one included, authorizes
    the request.

    Args:
        request: The request object.

    Returns:
        True if the Master-Token header is present, False otherwise
    """
    token = request.headers.get(MASTER_TOKEN_HEADER)
    if token is None:
        logger.debug(
            f"No {MASTER_TOKEN_HEADER} header on {request.method} {request.path}"
        )
        return False

    return True
