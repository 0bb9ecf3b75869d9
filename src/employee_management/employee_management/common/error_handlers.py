from __future__ import annotations

import logging

from flask import Flask, redirect, render_template, request, url_for
from werkzeug.exceptions import HTTPException, NotFound

logger = logging.getLogger(__name__)


def register(app: Flask) -> None:
    @app.route("/error", endpoint="error")
    def error():
        return render_template("error.html"), 500

    @app.errorhandler(NotFound)
    def not_found(e: NotFound):
        return render_template("404.html"), 404

    @app.errorhandler(Exception)
    def unhandled(e: Exception):
        if isinstance(e, HTTPException):
            return e

        logger.error(
            "Unhandled exception during request processing. Path: %s, Method: %s, User Agent: %s",
            request.path,
            request.method,
            request.headers.get("User-Agent", ""),
            exc_info=e,
        )
        return redirect(url_for("error"))
