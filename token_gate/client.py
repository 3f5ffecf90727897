"""
Login probe: obtains the master token from the checkpoint and presents it upstream.
"""

import logging
from typing import Optional
from urllib.parse import urljoin

import requests  # type: ignore

from token_gate.auth import MASTER_TOKEN_HEADER, MASTER_TOKEN_RESPONSE_HEADER

logger = logging.getLogger(__name__)


def fetch_master_token(checkpoint_url: str, timeout: int = 30) -> Optional[str]:
    """
    Logs in at the checkpoint and returns the issued master token.

    Raises:
        requests.exceptions.HTTPError: if the checkpoint answers with an error status
    """
    url = urljoin(checkpoint_url.rstrip("/") + "/", "auth")
    logger.info(f"Logging in at checkpoint: {url}")

    response = requests.post(url, timeout=timeout)
    response.raise_for_status()

    token = response.headers.get(MASTER_TOKEN_RESPONSE_HEADER)
    if token is None:
        logger.warning(f"Checkpoint response has no {MASTER_TOKEN_RESPONSE_HEADER}")
    return token


def call_gateway(
    gateway_url: str,
    token: Optional[str] = None,
    method: str = "GET",
    body: Optional[str] = None,
    timeout: int = 30,
) -> requests.Response:
    # 401 is an expected answer here, so no raise_for_status
    headers = {}
    if token is not None:
        headers[MASTER_TOKEN_HEADER] = token

    kwargs = {"headers": headers, "timeout": timeout}
    if body and method.upper() in ["POST", "PUT", "PATCH"]:
        kwargs["data"] = body

    logger.info(f"Making {method} request to gateway: {gateway_url}")
    response = requests.request(method, gateway_url, **kwargs)
    logger.info(f"Gateway response: {response.status_code}")
    return response


def probe(checkpoint_url: str, gateway_url: str) -> int:
    """Log in, then call the gateway with the token. Returns the gateway status."""
    token = fetch_master_token(checkpoint_url)
    return call_gateway(gateway_url, token).status_code
