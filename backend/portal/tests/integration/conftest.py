"""Shared fixtures for portal integration tests."""

import pytest
from starlette.testclient import TestClient

from portal.server.app import create_app
from portal.server.settings import PortalSettings
from portal.tests.integration.helpers import SIGN_IN_SECRET, TODAY
from shared.auth.session_store import SessionStore


@pytest.fixture
def app(tmp_path):
    application = create_app(
        PortalSettings(database_path=str(tmp_path / "portal.db"), sign_in_secret=SIGN_IN_SECRET),
        session_store=SessionStore(),
        today=lambda: TODAY,
    )
    yield application
    application.state.db.close()


@pytest.fixture
def client(app):
    return TestClient(app)
