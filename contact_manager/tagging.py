"""Helpers for comma-joined tag strings"""

from typing import Iterable

TAG_SEPARATOR = ","
# add-contact form fields; a tag checkbox with one of these names would collide
CONTACT_FIELDS = ("full_name", "phone_number", "email")
FORM_KEYS = ("csrf_token", "submit")
RESERVED_TAG_NAMES = CONTACT_FIELDS + FORM_KEYS


def normalize_tag_name(value) -> str:
    return str(value or "").strip().lower()


def split_tags(tags: str | None) -> list[str]:
    if not tags:
        return []
    return tags.split(TAG_SEPARATOR)


def join_tags(tags: Iterable[str]) -> str:
    return TAG_SEPARATOR.join(tags)


def remove_tag(tags: str | None, name: str) -> str | None:
    """Drop `name` from a tag string.

    Returns the new tag string, or None when `name` is not present.
    """
    tag_list = split_tags(tags)
    if name not in tag_list:
        return None
    tag_list.remove(name)
    return join_tags(tag_list)


def collect_tags(tag_strings: Iterable[str | None]) -> list[str]:
    """Unique tag names in first-seen order."""
    collected: list[str] = []
    for tags in tag_strings:
        for tag in split_tags(tags):
            if tag not in collected:
                collected.append(tag)
    return collected


def invalid_tag_name_reason(name: str) -> str | None:
    """Why `name` cannot be stored in a contact's tag string, if it cannot."""
    if not name:
        return "Tag name is empty"
    if TAG_SEPARATOR in name:
        return f'Tag name cannot contain "{TAG_SEPARATOR}"'
    if name in RESERVED_TAG_NAMES:
        return f'"{name}" is a reserved name'
    return None
