import logging
from typing import Any, Iterable, Mapping

from contact_manager.debounce import debounce
from contact_manager.model import ContactModel
from contact_manager.schemas import Contact, Result
from contact_manager.tagging import (
    CONTACT_FIELDS,
    FORM_KEYS,
    join_tags,
    normalize_tag_name,
)
from contact_manager.view import ContactView

logger = logging.getLogger(__name__)


def construct_tag_list(form: Mapping[str, Any]) -> str:
    """Every checked key of the add-contact form that is not a contact field."""
    return join_tags(
        key for key in form.keys() if key not in CONTACT_FIELDS + FORM_KEYS
    )


def split_contact_tags(contacts: Iterable[Contact]) -> list[dict[str, Any]]:
    """Template-ready contacts, with tags as a list."""
    return [{**contact.to_dict(), "tags": contact.tag_list} for contact in contacts]


class ContactController:
    model: ContactModel
    view: ContactView
    current_tag_filter: str | None

    def __init__(
        self, model: ContactModel, view: ContactView, search_debounce: float = 0.3
    ) -> None:
        self.model = model
        self.view = view
        self.current_tag_filter = None
        self.handle_search = debounce(search_debounce)(self._search)

        self.view.bind_tag_click(self.handle_tag_click)
        self.view.bind_search_bar_input(self.handle_search)
        self.view.bind_add_contact_submit(self.handle_add_contact)
        self.view.bind_delete_contact(self.handle_delete_contact)
        self.view.bind_add_tag_submit(self.handle_add_tag)
        self.view.bind_delete_tag(self.handle_delete_tag)

    def init(self) -> None:
        self.model.init()
        self.display_all_tags()
        self.display_all_contacts()

    def display_all_contacts(self) -> None:
        self.view.render_contacts(split_contact_tags(self.model.get_all_contacts()))

    def display_all_tags(self) -> None:
        self.view.render_tags(self.model.get_all_tags())

    def display_current_contacts(self) -> None:
        if self.current_tag_filter is None:
            self.display_all_contacts()
        else:
            contacts = self.model.filter_by_tag(self.current_tag_filter)
            self.view.render_contacts(split_contact_tags(contacts))

    def _search(self, text: str) -> list[Contact]:
        results = self.model.search_contacts(text)
        self.view.render_contacts(split_contact_tags(results))
        return results

    def handle_tag_click(self, name: str) -> None:
        if self.current_tag_filter == name:
            self.current_tag_filter = None
        else:
            self.current_tag_filter = name
        self.display_current_contacts()

    def handle_add_contact(self, form: Mapping[str, Any]) -> Result:
        new_contact = {key: form.get(key) or "" for key in CONTACT_FIELDS}
        new_contact["tags"] = construct_tag_list(form)

        result = self.model.add_contact(new_contact)
        if result.error:
            logger.warning("Contact was not added: %s", result.message)
            self.view.render_error(f"Contact was not added. {result.message}")
        self.display_all_contacts()
        return result

    def handle_delete_contact(self, id: int) -> Result:
        result = self.model.delete_contact(id)
        if result.error:
            self.view.render_error(f"Contact was not deleted. {result.message}")
        self.display_current_contacts()
        return result

    def handle_add_tag(self, name: str) -> Result:
        result = self.model.add_tag(name)
        if result.error:
            self.view.render_error(result.message)
        self.display_all_tags()
        return result

    def handle_delete_tag(self, name: str) -> Result:
        name = normalize_tag_name(name)
        result = self.model.delete_tag(name)
        if result.error:
            self.view.render_error(result.message)
        # a tag that survived a failed delete stays selected
        if self.current_tag_filter == name and result.tags is not None:
            self.current_tag_filter = None
        self.display_all_tags()
        if result.contacts is not None and self.current_tag_filter is None:
            self.view.render_contacts(split_contact_tags(result.contacts))
        else:
            self.display_current_contacts()
        return result
