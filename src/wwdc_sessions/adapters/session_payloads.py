"""Pydantic models for the sessions JSON document."""

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from wwdc_sessions.domain.sessions import SessionRecord

_URL_ADAPTER = TypeAdapter(AnyUrl)


class SessionPayload(BaseModel):
    """Session entry as authored in ``sessions.json``."""

    model_config = ConfigDict(strict=True, frozen=True)

    id: str
    year: int
    code: str
    title: str
    description: str
    permalink: str | None = None
    length_in_minutes: int | None = Field(default=None, alias="lengthInMinutes")
    related_session_ids: list[str] = Field(
        default_factory=list, alias="relatedSessionIDs"
    )

    @field_validator("permalink")
    @classmethod
    def _check_permalink(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError as exc:
            raise ValueError(f"permalink is not a valid URL: {value!r}") from exc
        return value

    @field_validator("related_session_ids", mode="before")
    @classmethod
    def _null_related_ids(cls, value: object) -> object:
        return [] if value is None else value

    def to_record(self) -> SessionRecord:
        """Convert the payload into an immutable domain record."""
        return SessionRecord(
            id=self.id,
            year=self.year,
            code=self.code,
            title=self.title,
            description=self.description,
            permalink=self.permalink,
            length_in_minutes=self.length_in_minutes,
            related_session_ids=tuple(self.related_session_ids),
        )


SESSIONS_DOCUMENT = TypeAdapter(dict[str, SessionPayload])
