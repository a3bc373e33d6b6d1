"""Pytest fixtures shared by the route tests."""

from __future__ import annotations

import pytest

from tests.helpers import make_app
from vendormart.constants import (
    GROUPS_EXTENSION,
    NOTIFICATIONS_EXTENSION,
    ORDERS_EXTENSION,
    PRODUCTS_EXTENSION,
)


@pytest.fixture
def app(tmp_path):
    return make_app(str(tmp_path))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def registry(app):
    return app.extensions[GROUPS_EXTENSION]


@pytest.fixture
def notifications(app):
    return app.extensions[NOTIFICATIONS_EXTENSION]


@pytest.fixture
def orders(app):
    return app.extensions[ORDERS_EXTENSION]


@pytest.fixture
def catalog(app):
    return app.extensions[PRODUCTS_EXTENSION]
