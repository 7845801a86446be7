import logging

from flask import Blueprint, current_app, request

from contact_manager.forms import AddContactForm
from contact_manager.middlewares.controller import controller_ready, get_controller

logger = logging.getLogger(__name__)

contact_bp = Blueprint("contact", __name__)


@contact_bp.route("/search")
@controller_ready
def search():
    controller = get_controller()
    future = controller.view.input_search(request.args.get("q", ""))
    # requests arriving within the debounce window share one API call
    future.result(timeout=current_app.config["SEARCH_TIMEOUT"])
    return controller.view.render_main()


@contact_bp.route("/contacts/new")
@controller_ready
def new():
    view = get_controller().view
    view.click_add_contact()
    return view.render_main()


@contact_bp.route("/contacts/cancel")
@controller_ready
def cancel():
    view = get_controller().view
    view.click_cancel_add_contact()
    return view.render_main()


@contact_bp.route("/contacts", methods=["POST"])
@controller_ready
def add():
    view = get_controller().view
    form = AddContactForm()
    if form.validate_on_submit():
        view.submit_add_contact(request.form)
    else:
        errors = [e for field_errors in form.errors.values() for e in field_errors]
        logger.info("Rejected add-contact form: %s", errors)
        view.reject_add_contact(request.form, errors)
    return view.render_main()


@contact_bp.route("/contacts/<int:id>/delete", methods=["POST"])
@controller_ready
def delete(id):
    view = get_controller().view
    view.click_delete_contact(id)
    return view.render_main()
