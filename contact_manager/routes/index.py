from flask import Blueprint
from flask_wtf.csrf import generate_csrf

from contact_manager.middlewares.controller import controller_ready, get_controller

index_bp = Blueprint("index", __name__)


@index_bp.route("/")
@controller_ready
def index():
    controller = get_controller()
    return controller.view.render_page(csrf_token=generate_csrf())
