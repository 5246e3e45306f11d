"""Dependency container wiring for the session registry."""

from dataclasses import dataclass

from wwdc_sessions.adapters.session_source import (
    BundledSessionSource,
    FileSessionSource,
    SessionSource,
)
from wwdc_sessions.config import Settings
from wwdc_sessions.services.sessions import SessionRegistryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_source: SessionSource
    session_service: SessionRegistryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    if resolved_settings.sessions_file is not None:
        session_source: SessionSource = FileSessionSource(
            resolved_settings.sessions_file
        )
    else:
        session_source = BundledSessionSource()
    session_service = SessionRegistryService(
        source=session_source,
        verify_ids=resolved_settings.verify_session_ids,
    )
    return AppContainer(
        settings=resolved_settings,
        session_source=session_source,
        session_service=session_service,
    )
