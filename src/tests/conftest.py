"""
Pytest configuration and shared fixtures for the qbo_client test suite.

HTTP never leaves the process: services get a MagicMock session whose
``request`` returns real ``requests.Response`` objects built from the XML
files under ``fixtures/``.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Generator, List, Optional
from unittest.mock import MagicMock, patch

import pytest
import requests

# Add src to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from qbo_client.config import QboConfig  # noqa: E402

FIXTURES_DIR = Path(__file__).parent / "fixtures"

REALM_ID = "9991111222"


def fixture(name: str) -> bytes:
    """Raw bytes of an XML fixture."""
    return (FIXTURES_DIR / name).read_bytes()


def make_response(
    status_code: int,
    body: bytes = b"",
    content_type: Optional[str] = "application/xml",
) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    if content_type:
        response.headers["Content-Type"] = content_type
    return response


@pytest.fixture
def mock_session() -> MagicMock:
    """A requests.Session stand-in; set ``.request.return_value`` per test."""
    session = MagicMock(spec=requests.Session)
    session.request.return_value = make_response(200, b"")
    return session


@pytest.fixture
def mock_auth_client() -> MagicMock:
    auth_client = MagicMock()
    auth_client.access_token = "test-access-token"
    auth_client.refresh_token = "test-refresh-token"
    return auth_client


@pytest.fixture
def make_service(
    mock_session: MagicMock, mock_auth_client: MagicMock
) -> Callable[..., Any]:
    """Factory building any service class wired to the mock session."""

    def _make(service_class: Any, config: Optional[QboConfig] = None, **kwargs: Any) -> Any:
        kwargs.setdefault("realm_id", REALM_ID)
        return service_class(
            auth_client=mock_auth_client,
            config=config or QboConfig(),
            session=mock_session,
            **kwargs,
        )

    return _make


@pytest.fixture
def mock_secretsmanager() -> Generator[MagicMock, None, None]:
    """Mock the boto3 Secrets Manager client used by the token store."""
    with patch("qbo_client.credentials.Session") as mock_session_class:
        client = MagicMock()
        mock_session_class.return_value.client.return_value = client
        yield client


@pytest.fixture(autouse=True)
def clean_qbo_environment() -> Generator[None, None, None]:
    """Keep developer shell settings out of QboConfig.from_env()."""
    names = ("QBO_SANDBOX", "QBO_LOG", "QBO_LOG_XML_PRETTY_PRINT")
    saved = {name: os.environ.pop(name) for name in names if name in os.environ}
    try:
        yield
    finally:
        os.environ.update(saved)


@pytest.fixture
def load_fixture() -> Callable[[str], bytes]:
    return fixture


@pytest.fixture
def response_factory() -> Callable[..., requests.Response]:
    return make_response


# Pytest markers for different test categories
pytest_plugins: List[str] = []


def pytest_configure(config: Any) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Fast unit tests with no external dependencies"
    )
    config.addinivalue_line("markers", "auth: Authentication and token tests")


def pytest_collection_modifyitems(config: Any, items: List[Any]) -> None:
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "auth" in item.name.lower() or "token" in item.name.lower():
            item.add_marker(pytest.mark.auth)
