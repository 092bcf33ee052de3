"""
Shared fixtures.

HTTP tests run against the ASGI app without a database: each resource's
repository functions are replaced by an `InMemoryTable` that mimics the
statements (RETURNING rows, unique constraints, COALESCE'd columns).
"""

from __future__ import annotations

import importlib
from collections.abc import AsyncGenerator
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import asyncpg
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel


class InMemoryTable:
    def __init__(
        self,
        *,
        unique: tuple[str, ...] = (),
        defaults: dict[str, Any] | None = None,
        keep_when_null: tuple[str, ...] = (),
    ) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self.unique = unique
        self.defaults = defaults or {}
        self.keep_when_null = keep_when_null
        self.fail_with: Exception | None = None
        self.statements = 0
        self._next_id = 1

    def _start(self) -> None:
        self.statements += 1
        if self.fail_with is not None:
            raise self.fail_with

    def _check_unique(self, values: dict[str, Any], *, exclude_id: int | None = None) -> None:
        for column in self.unique:
            value = values.get(column)
            if value is None:
                continue
            for row_id, row in self.rows.items():
                if row_id != exclude_id and row.get(column) == value:
                    raise asyncpg.UniqueViolationError(
                        f'duplicate key value violates unique constraint "{column}_key"'
                    )

    async def list_rows(self) -> list[dict[str, Any]]:
        self._start()
        return [dict(row) for row in self.rows.values()]

    async def get_row(self, row_id: int) -> dict[str, Any] | None:
        self._start()
        row = self.rows.get(row_id)
        return dict(row) if row is not None else None

    async def create_row(self, payload: BaseModel) -> dict[str, Any]:
        self._start()
        values = payload.model_dump()
        self._check_unique(values)
        row = {"id": self._next_id, **self.defaults, **values}
        self.rows[self._next_id] = row
        self._next_id += 1
        return dict(row)

    async def update_row(self, row_id: int, payload: BaseModel) -> dict[str, Any] | None:
        self._start()
        current = self.rows.get(row_id)
        if current is None:
            return None
        values = payload.model_dump()
        for column in self.keep_when_null:
            if values.get(column) is None:
                values[column] = current.get(column)
        self._check_unique(values, exclude_id=row_id)
        current.update(values)
        return dict(current)

    async def delete_row(self, row_id: int) -> dict[str, Any] | None:
        self._start()
        row = self.rows.pop(row_id, None)
        return dict(row) if row is not None else None


@dataclass(frozen=True)
class ResourceCase:
    path: str
    repository: str
    functions: tuple[str, str, str, str, str]
    valid: dict[str, Any]
    required: tuple[str, ...]
    deleted_key: str
    unique: tuple[str, ...] = ()
    defaults: tuple[tuple[str, Any], ...] = ()
    keep_when_null: tuple[str, ...] = ()


_NOW = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

RESOURCES: dict[str, ResourceCase] = {
    "blogs": ResourceCase(
        path="/api/blogs",
        repository="blogs.repository",
        functions=("list_blogs", "get_blog", "create_blog", "update_blog", "delete_blog"),
        valid={
            "title": "Electric tractors in 2024",
            "slug": "electric-tractors-2024",
            "content": "Field trials went well.",
            "author": "Bullwork Team",
            "tags": ["ev", "agri"],
        },
        required=("title", "slug", "content", "author"),
        deleted_key="deleted_blog",
        unique=("slug",),
        defaults=(("publication_date", _NOW),),
    ),
    "products": ResourceCase(
        path="/api/products",
        repository="products.repository",
        functions=("list_products", "get_product", "create_product", "update_product", "delete_product"),
        valid={
            "name": "Glide",
            "tagline": "Compact electric loader",
            "category": "loader",
            "image_urls": ["https://cdn.example.com/glide-1.png"],
            "related_products_ids": [2, 3],
        },
        required=("name",),
        deleted_key="deleted_product",
    ),
    "qna": ResourceCase(
        path="/api/qna",
        repository="qna.repository",
        functions=("list_entries", "get_entry", "create_entry", "update_entry", "delete_entry"),
        valid={"question": "What is the range?", "answer": "Up to 8 hours per charge."},
        required=("question", "answer"),
        deleted_key="deleted_qna",
    ),
    "awards": ResourceCase(
        path="/api/awards",
        repository="awards.repository",
        functions=("list_awards", "get_award", "create_award", "update_award", "delete_award"),
        valid={"image_url": "https://cdn.example.com/awards/innovation.png"},
        required=("image_url",),
        deleted_key="deleted_award",
    ),
    "media": ResourceCase(
        path="/api/media",
        repository="media.repository",
        functions=("list_media", "get_media", "create_media", "update_media", "delete_media"),
        valid={"url": "https://news.example.com/bullwork-feature"},
        required=("url",),
        deleted_key="deleted_media",
    ),
    "requests": ResourceCase(
        path="/api/requests",
        repository="sales_requests.repository",
        functions=("list_requests", "get_request", "create_request", "update_request", "delete_request"),
        valid={
            "request_type": "demo",
            "product_name": "Glide",
            "full_name": "Asha Rao",
            "email": "asha@example.com",
            "phone_number": "+91 90000 00000",
            "city": "Bengaluru",
            "quantity": 2,
        },
        required=("request_type", "full_name", "email", "phone_number"),
        deleted_key="deleted_request",
        defaults=(("status", "pending"), ("request_date", _NOW)),
        keep_when_null=("status",),
    ),
    "apply": ResourceCase(
        path="/api/apply",
        repository="applications.repository",
        functions=(
            "list_applications",
            "get_application",
            "create_application",
            "update_application",
            "delete_application",
        ),
        valid={"name": "Ravi Kumar", "email": "ravi@example.com", "position": "Firmware Engineer"},
        required=("name", "email"),
        deleted_key="deleted_application",
        defaults=(("created_at", _NOW),),
    ),
    "subscribe": ResourceCase(
        path="/api/subscribe",
        repository="subscriptions.repository",
        functions=(
            "list_subscriptions",
            "get_subscription",
            "create_subscription",
            "update_subscription",
            "delete_subscription",
        ),
        valid={"email": "a@x.com"},
        required=("email",),
        deleted_key="deleted_subscription",
        unique=("email",),
        defaults=(("subscribed_at", _NOW),),
    ),
}


@pytest.fixture
def tables(monkeypatch: pytest.MonkeyPatch) -> dict[str, InMemoryTable]:
    """Swap every resource repository for an in-memory table."""
    created: dict[str, InMemoryTable] = {}
    for name, case in RESOURCES.items():
        table = InMemoryTable(
            unique=case.unique,
            defaults=dict(case.defaults),
            keep_when_null=case.keep_when_null,
        )
        module = importlib.import_module(case.repository)
        list_fn, get_fn, create_fn, update_fn, delete_fn = case.functions
        monkeypatch.setattr(module, list_fn, table.list_rows)
        monkeypatch.setattr(module, get_fn, table.get_row)
        monkeypatch.setattr(module, create_fn, table.create_row)
        monkeypatch.setattr(module, update_fn, table.update_row)
        monkeypatch.setattr(module, delete_fn, table.delete_row)
        created[name] = table
    return created


@pytest_asyncio.fixture
async def client(tables: dict[str, InMemoryTable]) -> AsyncGenerator[AsyncClient, None]:
    from main import app

    # ASGITransport does not run the lifespan, so no pool is created.
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
