"""Shared fixtures for the proxy service tests."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from ticket_proxy_service.app import create_app
from ticket_proxy_service.config import ProxySettings
from ticket_tracker_interface.client import TicketTrackerClient


@pytest.fixture
def settings():
    """Settings built from keyword arguments only, ignoring any local .env file."""
    return ProxySettings(
        _env_file=None,
        jira_base="https://test.atlassian.net",
        jira_email="test@example.com",
        jira_api_token="dummy_token",
        project_key="PROJ",
    )


@pytest.fixture
def tracker():
    """A TicketTrackerClient stand-in; tests set return values per call."""
    return MagicMock(spec=TicketTrackerClient)


@pytest.fixture
def client(settings, tracker):
    return TestClient(create_app(settings, client=tracker))
