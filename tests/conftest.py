"""Test configuration and shared fixtures"""

import sys
from pathlib import Path

import pytest

# enable project imports relative to the current directory
project_root = Path(__file__).parent.parent
sys.path.append(str(project_root))

from contact_manager.app import create_app  # noqa: E402
from contact_manager.config import Config  # noqa: E402
from contact_manager.middlewares.controller import EXTENSION_KEY  # noqa: E402
from contact_manager.model import ContactModel  # noqa: E402
from fakes import SEED_CONTACTS, FakeContactsAPI  # noqa: E402


@pytest.fixture
def contacts_api() -> FakeContactsAPI:
    return FakeContactsAPI(SEED_CONTACTS)


@pytest.fixture
def model(contacts_api: FakeContactsAPI) -> ContactModel:
    m = ContactModel(contacts_api)  # type: ignore[arg-type]
    m.init()
    return m


@pytest.fixture
def test_config() -> Config:
    return Config(
        api_base_url="http://contacts-api.test",
        secret_key="test-secret",
        search_debounce=0.01,
        form_reset_delay=0,
        csrf_enabled=False,
    )


# each test gets its own app, controller and in-memory API
@pytest.fixture
def test_app(test_config: Config, contacts_api: FakeContactsAPI):
    app = create_app(test_config)
    app.config["TESTING"] = True
    app.extensions[EXTENSION_KEY].model.api = contacts_api
    client = app.test_client()
    yield client
