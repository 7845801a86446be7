"""Contacts model: REST API calls and the session tag list"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable

from contact_manager.errors.api import ContactsAPIError
from contact_manager.errors.base import ApplicationError
from contact_manager.errors.tag import InvalidTagName, TagAlreadyExists
from contact_manager.external.contacts import ContactsAPI
from contact_manager.schemas import Contact, Result
from contact_manager.tagging import (
    collect_tags,
    invalid_tag_name_reason,
    normalize_tag_name,
    remove_tag,
)

logger = logging.getLogger(__name__)


class ContactModel:
    api: ContactsAPI
    ready: bool

    def __init__(self, api: ContactsAPI, cascade_workers: int = 4) -> None:
        self.api = api
        self.cascade_workers = cascade_workers
        self.ready = False
        self._tags: list[str] = []
        self._tags_lock = threading.RLock()

    def init(self) -> None:
        """Seed the tag list from the tags of every stored contact."""
        tags = collect_tags(contact.tags for contact in self.get_all_contacts())
        with self._tags_lock:
            self._tags = tags
        self.ready = True
        logger.info("Model ready with %d tags", len(tags))

    def get_all_contacts(self) -> list[Contact]:
        return [Contact.from_dict(x) for x in self.api.list_contacts()]

    def get_all_tags(self) -> list[str]:
        with self._tags_lock:
            return self._tags.copy()

    def add_contact(self, info: dict[str, Any]) -> Result:
        info = {k: v for k, v in info.items() if k != "id"}
        return self._change(lambda: self.api.create_contact(info))

    def update_contact(self, id: int, partial: dict[str, Any]) -> Result:
        return self._change(lambda: self.api.update_contact(id, partial))

    def delete_contact(self, id: int) -> Result:
        return self._change(lambda: self.api.delete_contact(id))

    def add_tag(self, name: str) -> Result:
        name = normalize_tag_name(name)
        with self._tags_lock:
            reason = invalid_tag_name_reason(name)
            if reason:
                return self._rejected(InvalidTagName(reason))
            if name in self._tags:
                return self._rejected(
                    TagAlreadyExists(name), f'The tag "{name}" already exists'
                )
            self._tags.append(name)
            tags = self._tags.copy()
        logger.info("Tag %s added", name)
        return Result(error=False, message=f"{name} has been added", tags=tags)

    def delete_tag(self, name: str) -> Result:
        """Remove a tag from the list and from every contact carrying it.

        Contact updates run concurrently and are all waited for before the
        tag leaves the local list and contacts are fetched again.
        """
        name = normalize_tag_name(name)
        try:
            contacts = self.get_all_contacts()
        except ApplicationError as e:
            return self._failed(e)

        updates: dict[int, str] = {}
        for contact in contacts:
            tags = remove_tag(contact.tags, name)
            if tags is not None and contact.id is not None:
                updates[contact.id] = tags

        failed: list[int] = []
        if updates:
            with ThreadPoolExecutor(max_workers=self.cascade_workers) as executor:
                results = executor.map(
                    lambda item: (item[0], self.update_contact(item[0], {"tags": item[1]})),
                    updates.items(),
                )
                failed = [id for id, result in results if result.error]

        with self._tags_lock:
            if name in self._tags:
                self._tags.remove(name)
            tags = self._tags.copy()
        logger.info(
            "Tag %s deleted, %d contacts updated, %d failed",
            name,
            len(updates) - len(failed),
            len(failed),
        )

        try:
            contacts = self.get_all_contacts()
        except ApplicationError as e:
            result = self._failed(e)
            result.tags = tags
            return result

        if failed:
            return Result(
                error=True,
                message=f'Could not remove tag "{name}" from contacts {", ".join(map(str, failed))}',
                tags=tags,
                contacts=contacts,
            )
        return Result(message=f"{name} has been deleted", tags=tags, contacts=contacts)

    def filter_by_tag(self, name: str) -> list[Contact]:
        return [c for c in self.get_all_contacts() if name in c.tag_list]

    def search_contacts(self, text: str) -> list[Contact]:
        text = text.casefold()
        return [c for c in self.get_all_contacts() if text in c.full_name.casefold()]

    def _change(self, request: Callable[[], Any]) -> Result:
        """Run a mutating request, then fetch the full contact list."""
        try:
            request()
            return Result(contacts=self.get_all_contacts())
        except ApplicationError as e:
            return self._failed(e)

    @staticmethod
    def _failed(e: ApplicationError) -> Result:
        if isinstance(e, ContactsAPIError):
            logger.warning("Contacts API rejected request: %s", e.message)
            return Result(error=True, message=e.message)
        logger.warning("Contacts API unavailable: %s", e.error)
        return Result(error=e, message=e.error)

    @staticmethod
    def _rejected(e: ApplicationError, message: str | None = None) -> Result:
        return Result(error=True, message=message or e.error)
