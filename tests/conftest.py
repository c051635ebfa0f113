"""Shared fixtures: every test runs against its own database file."""

from __future__ import annotations

import sqlite3

import pytest
from fastapi.testclient import TestClient

from phonebook_api.app.core.db import connect, init_db
from phonebook_api.app.main import create_app
from phonebook_api.app.services.contact_service import ContactService


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "data" / "phonebook.db")


@pytest.fixture
def client(db_path):
    with TestClient(create_app(db_path=db_path)) as test_client:
        yield test_client


@pytest.fixture
def conn(db_path):
    connection: sqlite3.Connection = connect(db_path)
    init_db(connection)
    yield connection
    connection.close()


@pytest.fixture
def service(conn):
    return ContactService(conn)
