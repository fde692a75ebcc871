import json
from pathlib import Path
from unittest.mock import Mock

import pytest
import structlog

from src.clients import MewsClient
from src.config import MewsSettings


FIXTURES_DIR = Path(__file__).parent / "fixtures"

PROPERTY_ID = "851df8c8-90f2-4c4a-8e01-a4fc46b25178"
BASE_URL = "https://api.mews-test.local"


def load_fixture(name: str):
    with open(FIXTURES_DIR / "mews" / name) as f:
        return json.load(f)


@pytest.fixture
def mews_settings():
    """Mews settings without environment lookups or retry delay."""
    return MewsSettings(
        api_base_url=BASE_URL,
        client_token="client-token",
        access_token="access-token",
        client="Test Connector 1.0.0",
        timeout=5,
        retry_times=3,
        retry_delay_ms=0,
        timezone_override="Europe/Budapest",
    )


@pytest.fixture
def mock_client():
    """MewsClient double whose post() is configured per test."""
    return Mock(spec=MewsClient)


@pytest.fixture
def services_response():
    """Load Mews services/getAll response from fixture."""
    return load_fixture("services_response.json")


@pytest.fixture
def resource_categories_response():
    """Load Mews resourceCategories/getAll response from fixture."""
    return load_fixture("resource_categories_response.json")


@pytest.fixture
def availability_response():
    """Load Mews services/getAvailability response from fixture."""
    return load_fixture("availability_response.json")


@pytest.fixture
def reservations_response():
    """Load Mews reservations/getAll response from fixture."""
    return load_fixture("reservations_response.json")


@pytest.fixture
def property_id():
    return PROPERTY_ID


@pytest.fixture(autouse=True, scope="session")
def route_logs_to_stdlib():
    """Send structlog output through stdlib logging so stdout stays clean."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()
