"""
Upstream gateway: echoes request headers and authorizes on master token presence.
"""

import logging
from typing import IO, List, Tuple

from flask import Flask
from flask import request as flask_request
from werkzeug.datastructures import Headers

from token_gate.auth import is_authorized
from token_gate.http import Request, Response, header_key, register_error_handlers

logger = logging.getLogger(__name__)


def select_http_headers(headers: Headers) -> List[Tuple[str, str]]:
    """Header subset in arrival order, keyed the CGI way (MASTER_TOKEN)."""
    return [(header_key(name), value) for name, value in headers.items()]


def render_body(http_headers: List[Tuple[str, str]], body_stream: IO[bytes]) -> str:
    # The stream is shown by its handle, never read
    resp_body = "Headers: "
    for key, value in http_headers:
        resp_body += f"{key}:{value},"
    resp_body += f"\nRequest Body= {body_stream}"
    return resp_body


def handle_request(request: Request) -> Response:
    http_headers = select_http_headers(request.headers)
    status = 200 if is_authorized(request) else 401

    resp_body = render_body(http_headers, request.body)
    logger.info(f"request received = {resp_body}")

    return Response(status, {"Content-Type": "text/html"}, [resp_body])


def create_app() -> Flask:
    app = Flask(__name__, static_folder=None)

    # Runs ahead of URL routing, so every method and path lands here
    @app.before_request
    def upstream():
        return handle_request(Request.from_flask(flask_request)).as_tuple()

    register_error_handlers(app)
    return app
