"""
Pytest configuration and fixtures for movies-client tests.
"""

import json
from pathlib import Path

import pytest
import responses as responses_lib

from movies_client import ClientConfig, MoviesRestClient
from movies_client.core.logging.config import LoggingConfig
from stub_server import StubServer

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str):
    """Parsed JSON body from tests/fixtures."""
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


def fixture_text(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def load_json():
    """Loader for JSON body fixtures: load_json("avengers.json")."""
    return load_fixture


@pytest.fixture
def body_text():
    """Loader for raw fixture text."""
    return fixture_text


@pytest.fixture
def base_url():
    """Base URL for responses-mocked tests."""
    return "http://movies.local:8081"


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def client(base_url):
    """Movies client against the responses-mocked base URL."""
    client = MoviesRestClient(base_url=base_url)
    yield client
    client.close()


@pytest.fixture
def stub_server():
    """Local stub server, fresh for every test."""
    server = StubServer().start()
    yield server
    server.stop()


@pytest.fixture
def stub_client(stub_server):
    """
    Movies client against the stub server.

    Short timeouts keep delay and fault tests fast.
    """
    config = ClientConfig.create(
        base_url=stub_server.base_url,
        connect_timeout=1,
        read_timeout=0.5,
    )
    client = MoviesRestClient(config=config)
    yield client
    client.close()


@pytest.fixture
def logging_config():
    """Console-less DEBUG logging config."""
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
    )


@pytest.fixture
def logging_config_with_file(tmp_path):
    """LoggingConfig writing to a temporary file."""
    return LoggingConfig.create(
        level="DEBUG",
        format="json",
        enable_console=False,
        enable_file=True,
        file_path=str(tmp_path / "movies_client.log"),
    )
