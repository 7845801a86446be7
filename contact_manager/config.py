"""Application configuration"""

from dataclasses import dataclass, field
from os import getenv


@dataclass
class Config:
    app_name: str = "contact-manager"
    app_version: str = "0.1.0"

    secret_key: str = field(
        default=getenv("CONTACT_MANAGER_SECRET_KEY", "supersecret")
    )
    # base url of the contacts REST API, without the /api suffix
    api_base_url: str = field(
        default=getenv("CONTACT_MANAGER_API_BASE_URL", "http://localhost:3000")
    )
    api_timeout: float = field(
        default=float(getenv("CONTACT_MANAGER_API_TIMEOUT", 5))
    )

    # seconds
    search_debounce: float = field(
        default=float(getenv("CONTACT_MANAGER_SEARCH_DEBOUNCE", 0.3))
    )
    form_reset_delay: float = field(
        default=float(getenv("CONTACT_MANAGER_FORM_RESET_DELAY", 0.3))
    )

    cascade_workers: int = field(
        default=int(getenv("CONTACT_MANAGER_CASCADE_WORKERS", 4))
    )

    csrf_enabled: bool = True


def get_config():
    return Config()
