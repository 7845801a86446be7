import logging

from flask import Flask, render_template, request

from contact_manager.errors.base import ApplicationError
from contact_manager.middlewares.controller import get_controller

logger = logging.getLogger(__name__)


def application_error_handler(error: ApplicationError):
    logger.warning("%s (error_code=%s)", error.error, error.error_code)
    # htmx swaps only 2xx responses, fragment requests get the notice in place
    if request.headers.get("HX-Request"):
        view = get_controller().view
        view.render_error(error.error)
        return view.render_main(), 200
    return render_template("error.jinja2", error=error), error.http_code or 500


def register_error_handlers(app: Flask) -> None:
    app.register_error_handler(ApplicationError, application_error_handler)
