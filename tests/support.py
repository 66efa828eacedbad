"""
Shared test support: environment for the settings singleton and an in-memory
stand-in for the Supabase query builder.

Import this module before anything from ``app`` so the required settings are
present when ``app.core.config`` loads.
"""
from __future__ import annotations

import os
import tempfile
import unittest
from datetime import datetime
from unittest import mock

os.environ.setdefault("SUPABASE_URL", "https://example.supabase.co")
os.environ.setdefault("SUPABASE_KEY", "test-key")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="agency_site_logs_"))
os.environ.pop("RECAPTCHA_SECRET_KEY", None)

from fastapi.testclient import TestClient  # noqa: E402

from app.core import database  # noqa: E402
from app.core.config import settings  # noqa: E402

COMPANY_ROW = {
    "id": "company-1",
    "company_name": "EtherCore",
    "tagline": "Websites that work",
    "description": "Digital agency",
    "primary_email": "hello@ether-core.com",
    "phone": "+44 20 0000 0000",
    "website_url": "https://ether-core.com",
    "calendly_url": "https://calendly.com/ethercore",
    "logo_url": "https://ether-core.com/logo.png",
    "is_active": True,
}


def _comparable(value):
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return value


class FakeResponse:
    def __init__(self, data):
        self.data = data


class FakeQuery:
    """Chainable query mirroring the subset of postgrest calls the app makes."""

    def __init__(self, db: "FakeSupabase", table: str) -> None:
        self.db = db
        self.table = table
        self.filters = []
        self.orders = []
        self.row_limit = None
        self.to_insert = None

    def select(self, columns="*"):
        return self

    def eq(self, column, value):
        self.filters.append(lambda row: row.get(column) == value)
        return self

    def in_(self, column, values):
        self.filters.append(lambda row: row.get(column) in values)
        return self

    def gte(self, column, value):
        self.filters.append(
            lambda row: row.get(column) is not None and _comparable(row[column]) >= _comparable(value)
        )
        return self

    def contains(self, column, values):
        self.filters.append(lambda row: all(v in (row.get(column) or []) for v in values))
        return self

    def order(self, column, desc=False):
        self.orders.append((column, desc))
        return self

    def limit(self, count):
        self.row_limit = count
        return self

    def insert(self, record):
        self.to_insert = record
        return self

    def execute(self):
        if self.table in self.db.failing_tables:
            raise RuntimeError(f"{self.table} is unavailable")

        if self.to_insert is not None:
            records = self.to_insert if isinstance(self.to_insert, list) else [self.to_insert]
            inserted = []
            for record in records:
                row = {"id": len(self.db.tables.setdefault(self.table, [])) + 1, **record}
                self.db.tables[self.table].append(row)
                inserted.append(row)
            return FakeResponse(inserted)

        rows = [dict(row) for row in self.db.tables.get(self.table, []) if all(f(row) for f in self.filters)]
        for column, desc in reversed(self.orders):
            rows.sort(key=lambda row: (row.get(column) is None, _comparable(row.get(column))), reverse=desc)
        if self.row_limit is not None:
            rows = rows[:self.row_limit]
        return FakeResponse(rows)


class FakeSupabase:
    def __init__(self) -> None:
        self.tables = {}
        self.failing_tables = set()

    def table(self, name):
        return FakeQuery(self, name)


class DatastoreTestCase(unittest.TestCase):
    """Swaps the Supabase client for an empty in-memory one per test."""

    def setUp(self) -> None:
        self.db = FakeSupabase()
        patcher = mock.patch.object(database, "_client", self.db)
        patcher.start()
        self.addCleanup(patcher.stop)

    def patch(self, target, attribute, value):
        patcher = mock.patch.object(target, attribute, value)
        patcher.start()
        self.addCleanup(patcher.stop)

    def require_captcha(self) -> None:
        self.patch(settings, "RECAPTCHA_SECRET_KEY", "test-secret")


class ApiTestCase(DatastoreTestCase):
    """Datastore test case with a client for the whole application."""

    def setUp(self) -> None:
        super().setUp()
        from main import app

        self.client = TestClient(app)
