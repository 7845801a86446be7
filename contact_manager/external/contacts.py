import logging
from typing import Any

import requests

from contact_manager.config import Config
from contact_manager.errors.api import ContactsAPIError, ContactsAPIUnavailable

logger = logging.getLogger(__name__)


class ContactsAPI:
    """Thin HTTP client for the contacts REST API.

    Raises ContactsAPIError on a non-2xx status (the body is not parsed) and
    ContactsAPIUnavailable when the request itself fails.
    """

    url: str
    timeout: float

    def __init__(self, url: str, timeout: float = 5) -> None:
        self.url = url.rstrip("/")
        self.timeout = timeout

    def http(
        self,
        method: str,
        endpoint: str,
        params: dict | None = None,
        data: dict | None = None,
    ) -> requests.Response:
        try:
            logger.info("UI->API %s %s params=%s data=%s", method, endpoint, params, data)
            r = requests.request(
                method,
                f"{self.url}/{endpoint}",
                params=params,
                json=data,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.warning("UI-xAPI %s %s failed: %s", method, endpoint, e)
            raise ContactsAPIUnavailable(e) from e
        logger.info("UI<-API %s %s status=%s", method, endpoint, r.status_code)
        if not 200 <= r.status_code < 300:
            raise ContactsAPIError(r.status_code, r.reason)
        return r

    def list_contacts(self) -> list[dict[str, Any]]:
        r = self.http("GET", "api/contacts")
        try:
            return r.json()
        except ValueError as e:
            raise ContactsAPIUnavailable(f"invalid JSON in response: {e}") from e

    def create_contact(self, data: dict[str, Any]) -> requests.Response:
        return self.http("POST", "api/contacts/", data=data)

    def update_contact(self, id: int, data: dict[str, Any]) -> requests.Response:
        return self.http("PUT", f"api/contacts/{id}", data=data)

    def delete_contact(self, id: int) -> requests.Response:
        return self.http("DELETE", f"api/contacts/{id}")


def get_contacts_api_client(config: Config) -> ContactsAPI:
    return ContactsAPI(config.api_base_url, timeout=config.api_timeout)
