"""Loading and lookups for the session registry."""

import codecs
import logging
from dataclasses import dataclass, field

from pydantic import ValidationError

from wwdc_sessions.adapters.session_payloads import SESSIONS_DOCUMENT
from wwdc_sessions.adapters.session_source import BundledSessionSource, SessionSource
from wwdc_sessions.domain.errors import SessionDecodeError, SessionIdMismatchError
from wwdc_sessions.domain.sessions import SessionRecord

_logger = logging.getLogger(__name__)


def decode_sessions(
    data: bytes, *, verify_ids: bool = True
) -> dict[str, SessionRecord]:
    """Decode a sessions document into records keyed by session id.

    Decoding is all-or-nothing: any malformed entry fails the whole document.
    A leading UTF-8 byte order mark is ignored.
    """
    try:
        payloads = SESSIONS_DOCUMENT.validate_json(data.removeprefix(codecs.BOM_UTF8))
    except ValidationError as exc:
        _logger.warning("Sessions document rejected: %s error(s)", exc.error_count())
        raise SessionDecodeError(str(exc)) from exc

    sessions: dict[str, SessionRecord] = {}
    for key, payload in payloads.items():
        if payload.id != key:
            if verify_ids:
                raise SessionIdMismatchError(key, payload.id)
            _logger.warning("Session key %s does not match id %s", key, payload.id)
        sessions[key] = payload.to_record()
    _logger.debug("Decoded %s sessions", len(sessions))
    return sessions


def load_all_sessions(
    source: SessionSource | None = None, *, verify_ids: bool = True
) -> dict[str, SessionRecord]:
    """Load every session from ``source``, defaulting to the bundled document."""
    resolved_source = source if source is not None else BundledSessionSource()
    return decode_sessions(resolved_source.read_bytes(), verify_ids=verify_ids)


@dataclass
class SessionRegistryService:
    """Application service for the session registry."""

    source: SessionSource = field(default_factory=BundledSessionSource)
    verify_ids: bool = True

    def load_all(self) -> dict[str, SessionRecord]:
        """Load the full registry from the configured source."""
        return load_all_sessions(self.source, verify_ids=self.verify_ids)

    @staticmethod
    def get(
        sessions: dict[str, SessionRecord], session_id: str
    ) -> SessionRecord | None:
        """Return a session by id, if present."""
        return sessions.get(session_id)

    @staticmethod
    def related_sessions(
        sessions: dict[str, SessionRecord], session_id: str
    ) -> list[SessionRecord]:
        """Resolve related sessions in authored order, skipping unknown ids."""
        session = sessions[session_id]
        related: list[SessionRecord] = []
        for related_id in session.related_session_ids:
            record = sessions.get(related_id)
            if record is None:
                _logger.debug(
                    "Related session %s of %s not in registry", related_id, session_id
                )
                continue
            related.append(record)
        return related

    @staticmethod
    def sessions_for_year(
        sessions: dict[str, SessionRecord], year: int
    ) -> list[SessionRecord]:
        """Return the sessions of one event year ordered by code."""
        return sorted(
            (record for record in sessions.values() if record.year == year),
            key=lambda record: (len(record.code), record.code),
        )
