"""Test doubles for the contacts API and the view"""

import threading
from typing import Any

from contact_manager.errors.api import ContactsAPIError
from contact_manager.view import ContactView


class FakeContactsAPI:
    """In-memory stand-in for the contacts REST API client"""

    def __init__(self, contacts: list[dict]):
        self.contacts = {c["id"]: dict(c) for c in contacts}
        self.next_id = max(self.contacts, default=0) + 1
        self.calls: list[tuple] = []
        # endpoint name -> exception raised on the next calls
        self.failures: dict[str, Exception] = {}
        # endpoint name -> exception raised on the next call only
        self.failures_once: dict[str, Exception] = {}
        self.failing_ids: set[int] = set()
        self._lock = threading.Lock()

    def _check(self, name: str, id: int | None = None) -> None:
        with self._lock:
            self.calls.append((name, id))
        if name in self.failures:
            raise self.failures[name]
        if name in self.failures_once:
            raise self.failures_once.pop(name)
        if id is not None and id in self.failing_ids:
            raise ContactsAPIError(500, "Internal Server Error")

    def list_contacts(self) -> list[dict]:
        self._check("list")
        return [dict(c) for c in self.contacts.values()]

    def create_contact(self, data: dict) -> None:
        self._check("create")
        with self._lock:
            self.contacts[self.next_id] = {"id": self.next_id, **data}
            self.next_id += 1

    def update_contact(self, id: int, data: dict) -> None:
        self._check("update", id)
        if id not in self.contacts:
            raise ContactsAPIError(404, "Not Found")
        with self._lock:
            self.contacts[id].update(data)

    def delete_contact(self, id: int) -> None:
        self._check("delete", id)
        if id not in self.contacts:
            raise ContactsAPIError(404, "Not Found")
        with self._lock:
            del self.contacts[id]

    def count(self, name: str) -> int:
        return len([c for c in self.calls if c[0] == name])


class RecordingView(ContactView):
    """Records every render call and keeps bound handlers by event name"""

    def __init__(self):
        self.calls: list[tuple[str, Any]] = []
        self.handlers: dict[str, Any] = {}

    def render_contacts(self, contacts):
        self.calls.append(("render_contacts", contacts))

    def render_tags(self, tags):
        self.calls.append(("render_tags", tags))

    def render_add_contact_form(self, tags):
        self.calls.append(("render_add_contact_form", tags))

    def render_error(self, message):
        self.calls.append(("render_error", message))

    def bind_add_contact_submit(self, handler):
        self.handlers["add_contact"] = handler

    def bind_search_bar_input(self, handler):
        self.handlers["search"] = handler

    def bind_tag_click(self, handler):
        self.handlers["tag_click"] = handler

    def bind_delete_contact(self, handler):
        self.handlers["delete_contact"] = handler

    def bind_add_tag_submit(self, handler):
        self.handlers["add_tag"] = handler

    def bind_delete_tag(self, handler):
        self.handlers["delete_tag"] = handler

    def last(self, name: str):
        for call, value in reversed(self.calls):
            if call == name:
                return value
        return None

    def names(self) -> list[str]:
        return [call for call, _ in self.calls]


SEED_CONTACTS = [
    {
        "id": 1,
        "full_name": "Kermit the Frog",
        "phone_number": "12345",
        "email": "green@kermitthefrog.com",
        "tags": "frog,icon",
    },
    {
        "id": 2,
        "full_name": "Scooby-Doo",
        "phone_number": "119",
        "email": "scoobz@zoinks.com",
        "tags": "dog,investigator,icon",
    },
    {
        "id": 3,
        "full_name": "Miss Piggy",
        "phone_number": "555",
        "email": "piggy@muppets.com",
        "tags": "",
    },
]
