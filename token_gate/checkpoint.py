"""
Checkpoint service: a static login endpoint that hands out the master token.
"""

import logging

from flask import Flask, make_response

from token_gate.auth import MASTER_TOKEN_RESPONSE_HEADER, MASTER_TOKEN_VALUE
from token_gate.http import register_error_handlers

logger = logging.getLogger(__name__)

LOGIN_PAGE = "this is a login page"
LOGIN_SUCCESS = "login success!"


def create_app() -> Flask:
    app = Flask(__name__)

    @app.get("/auth")
    def login_page():
        return LOGIN_PAGE

    @app.post("/auth")
    def login():
        logger.info("Login accepted, issuing master token")
        response = make_response(LOGIN_SUCCESS)
        response.headers[MASTER_TOKEN_RESPONSE_HEADER] = MASTER_TOKEN_VALUE
        return response

    register_error_handlers(app)
    return app
