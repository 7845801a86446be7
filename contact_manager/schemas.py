from dataclasses import asdict, dataclass, field
from typing import Any

from contact_manager.tagging import split_tags


@dataclass
class Contact:
    id: int | None
    full_name: str
    phone_number: str = ""
    email: str = ""
    # comma-joined lowercase tag names, "" when untagged
    tags: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contact":
        return cls(
            id=data.get("id"),
            full_name=data.get("full_name") or "",
            phone_number=data.get("phone_number") or "",
            email=data.get("email") or "",
            tags=data.get("tags") or "",
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        if self.id is None:
            data.pop("id")
        return data

    @property
    def tag_list(self) -> list[str]:
        return split_tags(self.tags)


@dataclass
class Result:
    """Outcome of a model operation.

    `error` is False on success, True for a rejected request (HTTP status or
    validation) and the exception itself for a transport failure.
    """

    error: bool | Exception = False
    message: str = ""
    contacts: list[Contact] | None = None
    tags: list[str] | None = field(default=None)

    @property
    def ok(self) -> bool:
        return not self.error
