"""
Process entry points for the checkpoint service, the gateway and the login probe
"""

import logging
import os
import sys

import requests  # type: ignore

from token_gate.checkpoint import create_app as create_checkpoint_app
from token_gate.client import probe
from token_gate.config import (
    CHECKPOINT_DEFAULT_PORT,
    GATEWAY_DEFAULT_PORT,
    ServerConfig,
    checkpoint_config,
    gateway_config,
    log_level,
)
from token_gate.gateway import create_app as create_gateway_app

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        stream=sys.stdout,
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _serve(app, config: ServerConfig) -> None:
    logger.info(f"Starting {app.name} on {config.host}:{config.port}")
    app.run(host=config.host, port=config.port, threaded=True)


def run_checkpoint() -> None:
    """Serve the checkpoint service (default 0.0.0.0:4567)"""
    configure_logging()
    _serve(create_checkpoint_app(), checkpoint_config())


def run_gateway() -> None:
    """Serve the upstream gateway (default 0.0.0.0:9292)"""
    configure_logging()
    _serve(create_gateway_app(), gateway_config())


def run_probe() -> None:
    configure_logging()
    checkpoint_url = os.environ.get(
        "CHECKPOINT_URL", f"http://localhost:{CHECKPOINT_DEFAULT_PORT}"
    )
    gateway_url = os.environ.get(
        "GATEWAY_URL", f"http://localhost:{GATEWAY_DEFAULT_PORT}"
    )

    try:
        status = probe(checkpoint_url, gateway_url)
    except requests.exceptions.RequestException as e:
        logger.error(f"Probe failed: {e}")
        sys.exit(1)

    logger.info(f"Gateway answered {status}")
    sys.exit(0 if status == 200 else 1)
