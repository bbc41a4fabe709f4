"""Shared fixtures.

Settings are read from ``EARNINGS_*`` environment variables, so every test
starts from a clean slate regardless of the developer's shell or ``.env``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from uuid import uuid4

import pytest

_ENV_VARS = ("EARNINGS_GBP_USD_RATE", "EARNINGS_DATE_ORDER", "EARNINGS_LOG_LEVEL")

TODAY = date(2026, 10, 18)


@pytest.fixture(autouse=True)
def _clean_earnings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@dataclass
class FakeUpload:
    """Stand-in for Streamlit's ``UploadedFile``."""

    name: str = "export.csv"
    data: bytes = b""
    type: str = "text/csv"
    error: Exception | None = None
    file_id: str = field(default_factory=lambda: uuid4().hex)

    @property
    def size(self) -> int:
        return len(self.data)

    def getvalue(self) -> bytes:
        if self.error is not None:
            raise self.error
        return self.data


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def make_upload():
    def _make(text: str = "", name: str = "export.csv", type: str = "text/csv", error=None) -> FakeUpload:
        return FakeUpload(name=name, data=text.encode("utf-8"), type=type, error=error)

    return _make
