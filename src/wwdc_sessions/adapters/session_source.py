"""Byte sources for the sessions JSON document."""

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Protocol

from wwdc_sessions.domain.errors import ResourceNotFoundError

BUNDLED_PACKAGE = "wwdc_sessions.resources"
BUNDLED_RESOURCE = "sessions.json"


class SessionSource(Protocol):
    """Interface for anything that can supply the sessions document."""

    def read_bytes(self) -> bytes:
        """Return the raw bytes of the sessions document."""


@dataclass(frozen=True)
class FileSessionSource(SessionSource):
    """Reads the sessions document from an explicit path."""

    path: Path

    def read_bytes(self) -> bytes:
        """Read the file, mapping open failures to ``ResourceNotFoundError``."""
        try:
            return Path(self.path).read_bytes()
        except OSError as exc:
            raise ResourceNotFoundError(
                f"Sessions file not readable: {self.path}"
            ) from exc


@dataclass(frozen=True)
class BundledSessionSource(SessionSource):
    """Reads the sessions document shipped inside a package."""

    package: str = BUNDLED_PACKAGE
    resource: str = BUNDLED_RESOURCE

    def read_bytes(self) -> bytes:
        """Read the packaged resource."""
        try:
            return resources.files(self.package).joinpath(self.resource).read_bytes()
        except (ModuleNotFoundError, OSError) as exc:
            raise ResourceNotFoundError(
                f"Bundled resource {self.resource!r} missing from {self.package!r}"
            ) from exc
