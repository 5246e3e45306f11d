"""Errors raised while loading the session registry."""


class SessionRegistryError(Exception):
    """Base error for session registry failures."""


class ResourceNotFoundError(SessionRegistryError):
    """Raised when the sessions document cannot be located or opened."""


class SessionDecodeError(SessionRegistryError):
    """Raised when the sessions document is not valid JSON of the expected shape."""


class SessionIdMismatchError(SessionDecodeError):
    """Raised when a record's id differs from the key it is stored under."""

    def __init__(self, key: str, session_id: str) -> None:
        super().__init__(f"Session stored under {key!r} has id {session_id!r}")
        self.key = key
        self.session_id = session_id
