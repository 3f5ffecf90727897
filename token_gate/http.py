"""
HTTP request/response shapes shared by the checkpoint service and the gateway.
"""

import logging
from typing import IO, Dict, List, Tuple

from flask import Flask
from flask import Request as FlaskRequest
from werkzeug.datastructures import Headers
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


def header_key(name: str) -> str:
    """Render a header name the CGI way: Master-Token -> MASTER_TOKEN."""
    return name.upper().replace("-", "_")


class Request:
    """
    A simple object to represent an incoming HTTP request.
    """

    def __init__(
        self,
        host: str,
        method: str,
        path: str,
        headers: Headers,
        body: IO[bytes],
    ):
        self.host = host
        self.method = method
        self.path = path
        self.headers = headers
        self.body = body

    @classmethod
    def from_flask(cls, request: FlaskRequest) -> "Request":
        # request.stream is the raw input; reading it here would consume it
        return cls(
            host=request.host,
            method=request.method,
            path=request.path,
            headers=Headers(request.headers.items()),
            body=request.stream,
        )


class Response:
    def __init__(
        self,
        status: int,
        headers: Dict[str, str],
        body: List[str],
    ):
        self.status = status
        self.headers = headers
        self.body = body

    def as_tuple(self) -> Tuple[str, int, Dict[str, str]]:
        """Shape accepted as a Flask view return value."""
        return "".join(self.body), self.status, self.headers


def register_error_handlers(app: Flask) -> None:
    """Log unexpected exceptions as a 500; framework HTTP errors pass through."""

    @app.errorhandler(Exception)
    def _handle_exception(e: Exception):
        if isinstance(e, HTTPException):
            return e

        logger.error(f"Error processing request: {str(e)}", exc_info=True)
        return _create_error_response(500, "Internal Server Error").as_tuple()


def _create_error_response(status_code: int, message: str) -> Response:
    return Response(status_code, {"Content-Type": "text/plain"}, [message])
