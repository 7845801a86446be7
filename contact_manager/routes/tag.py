from flask import Blueprint

from contact_manager.forms import TagForm
from contact_manager.middlewares.controller import controller_ready, get_controller

tag_bp = Blueprint("tag", __name__)


@tag_bp.route("/tags", methods=["POST"])
@controller_ready
def add():
    view = get_controller().view
    form = TagForm()
    if form.validate_on_submit():
        view.submit_add_tag(form.name.data)
    else:
        view.render_error(
            "; ".join(e for errors in form.errors.values() for e in errors)
        )
    return view.render_main()


@tag_bp.route("/tags/<path:name>/toggle", methods=["POST"])
@controller_ready
def toggle(name):
    view = get_controller().view
    view.click_tag(name)
    return view.render_main()


@tag_bp.route("/tags/<path:name>/delete", methods=["POST"])
@controller_ready
def delete(name):
    view = get_controller().view
    view.click_delete_tag(name)
    return view.render_main()
