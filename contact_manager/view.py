"""Rendering side of the contact manager.

ContactView is the interface the controller talks to. JinjaView renders
server-side HTML fragments and keeps the page state a browser would keep in
the DOM: which sections are hidden, which tag is highlighted and what the
add-contact form currently holds.
"""

import logging
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Mapping

from jinja2 import Environment, FileSystemLoader, select_autoescape

logger = logging.getLogger(__name__)

TEMPLATES_PATH = Path(__file__).parent / "templates"

Handler = Callable[..., Any]


class ContactView(ABC):
    @abstractmethod
    def render_contacts(self, contacts: list[dict[str, Any]]) -> None: ...

    @abstractmethod
    def render_tags(self, tags: list[str]) -> None: ...

    @abstractmethod
    def render_add_contact_form(self, tags: list[str]) -> None: ...

    @abstractmethod
    def render_error(self, message: str) -> None: ...

    @abstractmethod
    def bind_add_contact_submit(self, handler: Handler) -> None: ...

    @abstractmethod
    def bind_search_bar_input(self, handler: Handler) -> None: ...

    @abstractmethod
    def bind_tag_click(self, handler: Handler) -> None: ...

    @abstractmethod
    def bind_delete_contact(self, handler: Handler) -> None: ...

    @abstractmethod
    def bind_add_tag_submit(self, handler: Handler) -> None: ...

    @abstractmethod
    def bind_delete_tag(self, handler: Handler) -> None: ...


class JinjaView(ContactView):
    def __init__(self, form_reset_delay: float = 0.3) -> None:
        self.form_reset_delay = form_reset_delay
        self._env = Environment(
            loader=FileSystemLoader(TEMPLATES_PATH),
            autoescape=select_autoescape(["html", "jinja2"]),
        )
        self._templates = {
            "contacts": self._env.get_template("widgets/contacts.jinja2"),
            "tags": self._env.get_template("widgets/tags.jinja2"),
            "add_contact_tags": self._env.get_template(
                "widgets/add_contact_tags.jinja2"
            ),
            "main": self._env.get_template("main.jinja2"),
            "page": self._env.get_template("index.jinja2"),
        }
        self._handlers: dict[str, Handler] = {}
        self._lock = threading.RLock()

        self.contacts_html = ""
        self.tags_html = ""
        self.add_contact_tags_html = ""
        self.contacts_hidden = False
        self.form_hidden = True
        self.active_filter: str | None = None
        self.form_values: dict[str, str] = {}
        self.form_errors: list[str] = []
        self.notice: str | None = None
        self._rendered_tags: list[str] = []

    # rendering

    def render_contacts(self, contacts: list[dict[str, Any]]) -> None:
        html = self._templates["contacts"].render(contacts=contacts)
        with self._lock:
            self.form_hidden = True
            self.contacts_hidden = False
            self.contacts_html = html

    def render_tags(self, tags: list[str]) -> None:
        with self._lock:
            if self.active_filter not in tags:
                self.active_filter = None
            self._rendered_tags = list(tags)
            self._render_tags_html()

    def render_add_contact_form(self, tags: list[str]) -> None:
        html = self._templates["add_contact_tags"].render(tags=tags)
        with self._lock:
            self.add_contact_tags_html = html
            self.contacts_hidden = True
            self.form_hidden = False

    def render_error(self, message: str) -> None:
        with self._lock:
            self.notice = message

    def render_main(self) -> str:
        with self._lock:
            html = self._templates["main"].render(view=self)
            # a notice is shown once
            self.notice = None
        return html

    def render_page(self, csrf_token: str | None = None) -> str:
        with self._lock:
            html = self._templates["page"].render(
                view=self, csrf_header_token=csrf_token
            )
            self.notice = None
        return html

    # handler registration

    def bind_add_contact_submit(self, handler: Handler) -> None:
        self._handlers["add_contact"] = handler

    def bind_search_bar_input(self, handler: Handler) -> None:
        self._handlers["search"] = handler

    def bind_tag_click(self, handler: Handler) -> None:
        self._handlers["tag_click"] = handler

    def bind_delete_contact(self, handler: Handler) -> None:
        self._handlers["delete_contact"] = handler

    def bind_add_tag_submit(self, handler: Handler) -> None:
        self._handlers["add_tag"] = handler

    def bind_delete_tag(self, handler: Handler) -> None:
        self._handlers["delete_tag"] = handler

    # user events, called by the web layer

    def submit_add_contact(self, form: Mapping[str, str]) -> Any:
        with self._lock:
            self.form_values = dict(form)
            self.form_errors = []
        self._schedule_form_reset()
        return self._dispatch("add_contact", form)

    def reject_add_contact(self, form: Mapping[str, str], errors: list[str]) -> None:
        """Keep the form open with the submitted values and error messages."""
        with self._lock:
            self.form_values = dict(form)
            self.form_errors = errors
        self.render_add_contact_form(self._rendered_tags)

    def input_search(self, text: str) -> Any:
        return self._dispatch("search", text)

    def click_tag(self, name: str) -> Any:
        with self._lock:
            self.active_filter = None if self.active_filter == name else name
            self._render_tags_html()
        return self._dispatch("tag_click", name)

    def click_add_contact(self) -> None:
        self.render_add_contact_form(self._rendered_tags)

    def click_cancel_add_contact(self) -> None:
        with self._lock:
            self.contacts_hidden = False
            self.form_hidden = True
            self._reset_form()

    def click_delete_contact(self, id: int) -> Any:
        return self._dispatch("delete_contact", id)

    def submit_add_tag(self, name: str) -> Any:
        return self._dispatch("add_tag", name)

    def click_delete_tag(self, name: str) -> Any:
        return self._dispatch("delete_tag", name)

    def _dispatch(self, event: str, *args) -> Any:
        handler = self._handlers.get(event)
        if handler is None:
            logger.debug("No handler bound for %s", event)
            return None
        return handler(*args)

    def _render_tags_html(self) -> None:
        self.tags_html = self._templates["tags"].render(
            tags=self._rendered_tags, active_filter=self.active_filter
        )

    def _schedule_form_reset(self) -> None:
        if self.form_reset_delay <= 0:
            self._reset_form()
            return
        timer = threading.Timer(self.form_reset_delay, self._reset_form)
        timer.daemon = True
        timer.start()

    def _reset_form(self) -> None:
        with self._lock:
            self.form_values = {}
            self.form_errors = []
