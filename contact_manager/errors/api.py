"""Contacts REST API errors, raised by the HTTP client"""

from contact_manager.errors.base import ApplicationError


class ContactsAPIError(ApplicationError):
    http_code = 502
    error_code = 1502
    error = "Contacts API returned an error"

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.status_code}: {self.reason}"


class ContactsAPIUnavailable(ApplicationError):
    http_code = 503
    error_code = 1503
    error = "Request to contacts API failed"
