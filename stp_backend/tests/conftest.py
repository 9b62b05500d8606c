from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from stp_backend.app import create_app
from stp_backend.config import Settings


@pytest.fixture()
def client() -> FlaskClient:
    app = create_app(Settings(max_periods=40))
    with app.test_client() as test_client:
        yield test_client
