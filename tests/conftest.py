"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from wwdc_sessions.adapters.session_source import SessionSource
from wwdc_sessions.config import Settings
from wwdc_sessions.domain.errors import ResourceNotFoundError


@dataclass
class InMemorySessionSource(SessionSource):
    """In-memory session source for tests."""

    content: bytes | None = None
    reads: list[bytes] = field(default_factory=list)

    def read_bytes(self) -> bytes:
        if self.content is None:
            raise ResourceNotFoundError("no sessions document")
        self.reads.append(self.content)
        return self.content


def session_entry(session_id: str, **overrides: object) -> dict[str, object]:
    """Build a JSON-ready session entry."""
    year = int(session_id[4:8])
    code = session_id.split("-", 1)[1]
    entry: dict[str, object] = {
        "id": session_id,
        "year": year,
        "code": code,
        "title": f"Session {code}",
        "description": "An example session.",
        "permalink": f"https://developer.apple.com/wwdc{year % 100}/{code}",
        "lengthInMinutes": 20,
        "relatedSessionIDs": [],
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def sessions_document() -> dict[str, dict[str, object]]:
    return {
        "wwdc2023-10187": session_entry(
            "wwdc2023-10187",
            title="Meet SwiftData",
            lengthInMinutes=8,
            relatedSessionIDs=["wwdc2023-10154", "wwdc2023-99999", "wwdc2023-10148"],
        ),
        "wwdc2023-10154": session_entry(
            "wwdc2023-10154", title="Build an app with SwiftData"
        ),
        "wwdc2023-10148": session_entry(
            "wwdc2023-10148", permalink=None, lengthInMinutes=None
        ),
        "wwdc2022-110929": session_entry("wwdc2022-110929"),
    }


@pytest.fixture
def session_source(
    sessions_document: dict[str, dict[str, object]],
) -> InMemorySessionSource:
    return InMemorySessionSource(json.dumps(sessions_document).encode())


@pytest.fixture
def settings() -> Settings:
    return Settings(sessions_file=None, verify_session_ids=True)
