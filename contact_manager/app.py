"""Flask app initialization, exception handling"""

import logging

from flask import Flask
from flask_cors import CORS
from flask_wtf.csrf import CSRFProtect

from contact_manager.config import Config, get_config
from contact_manager.controller import ContactController
from contact_manager.errors.handler import register_error_handlers
from contact_manager.external.contacts import get_contacts_api_client
from contact_manager.middlewares.controller import EXTENSION_KEY
from contact_manager.model import ContactModel
from contact_manager.routes.contact import contact_bp
from contact_manager.routes.index import index_bp
from contact_manager.routes.tag import tag_bp
from contact_manager.view import JinjaView

logger = logging.getLogger(__name__)


def create_app(config: Config | None = None) -> Flask:
    config = config or get_config()

    app = Flask(__name__)
    app.secret_key = config.secret_key
    app.config["WTF_CSRF_ENABLED"] = config.csrf_enabled
    # a debounced search waits for the trailing API call
    app.config["SEARCH_TIMEOUT"] = config.search_debounce + config.api_timeout + 1
    CORS(app)
    if config.csrf_enabled:
        CSRFProtect(app)

    app.register_blueprint(index_bp, url_prefix="/")
    app.register_blueprint(contact_bp, url_prefix="/hx")
    app.register_blueprint(tag_bp, url_prefix="/hx")
    register_error_handlers(app)

    model = ContactModel(
        get_contacts_api_client(config), cascade_workers=config.cascade_workers
    )
    view = JinjaView(form_reset_delay=config.form_reset_delay)
    app.extensions[EXTENSION_KEY] = ContactController(
        model, view, search_debounce=config.search_debounce
    )
    logger.info("%s %s using API at %s", config.app_name, config.app_version, config.api_base_url)
    return app
