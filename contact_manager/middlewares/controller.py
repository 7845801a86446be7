import logging
import threading
from functools import wraps

from flask import current_app

from contact_manager.controller import ContactController

logger = logging.getLogger(__name__)

EXTENSION_KEY = "contact_manager"

_init_lock = threading.Lock()


def get_controller() -> ContactController:
    return current_app.extensions[EXTENSION_KEY]


def controller_ready(f):
    """Load tags and contacts once, before the first request renders anything."""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        controller = get_controller()
        if not controller.model.ready:
            with _init_lock:
                if not controller.model.ready:
                    logger.info("Initializing contact manager")
                    controller.init()
        return f(*args, **kwargs)

    return decorated_function
