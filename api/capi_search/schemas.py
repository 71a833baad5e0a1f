from datetime import datetime, timezone
from enum import Enum
from typing import Any, Literal, Optional, Tuple

from pydantic import (
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from .outcome import Failure, FetchOutcome, Success, ValidationFailed

_url = TypeAdapter(AnyUrl)


class Pillar(str, Enum):
    NEWS = "pillar/news"
    OPINION = "pillar/opinion"
    SPORT = "pillar/sport"
    LIFESTYLE = "pillar/lifestyle"
    ARTS = "pillar/arts"
    # Labs content carries no pillar at all, hence Optional below


PILLAR_IDS = frozenset(p.value for p in Pillar)


def _strict(info: ValidationInfo) -> bool:
    return bool((info.context or {}).get("strict_pillar_enum", True))


class ResultFields(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    thumbnail: Optional[str] = None
    trail_text: Optional[str] = Field(None, alias="trailText")
    byline: Optional[str] = None

    @field_validator("thumbnail")
    @classmethod
    def thumbnail_is_url(cls, v: Optional[str], info: ValidationInfo):
        if v is None or not _strict(info):
            return v
        try:
            _url.validate_python(v)
        except ValidationError:
            raise ValueError("thumbnail must be an absolute URL")
        return v


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    pillar_id: Optional[Pillar] = Field(None, alias="pillarId")
    web_publication_date: datetime = Field(alias="webPublicationDate")
    web_title: str = Field(alias="webTitle", min_length=1)
    web_url: AnyUrl = Field(alias="webUrl")
    fields: ResultFields = Field(default_factory=ResultFields)

    @field_validator("pillar_id", mode="before")
    @classmethod
    def unknown_pillar_is_absent(cls, v: Any, info: ValidationInfo):
        if v is None or _strict(info):
            return v
        return v if isinstance(v, str) and v in PILLAR_IDS else None

    @field_validator("web_publication_date")
    @classmethod
    def assume_utc(cls, v: datetime):
        # CAPI always sends "Z"; anything naive is taken to be UTC too
        return v if v.tzinfo else v.replace(tzinfo=timezone.utc)


class SearchResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["ok"]
    results: Tuple[SearchResult, ...]


class SearchEnvelope(BaseModel):
    model_config = ConfigDict(frozen=True)

    response: SearchResponse


def validate(raw: Any, *, strict_pillar_enum: bool = True) -> FetchOutcome[Tuple[SearchResult, ...]]:
    """Narrow an untyped CAPI search payload to its tuple of results.

    Returns a `Failure` carrying every offending field path (e.g.
    ``response.results.3.webUrl``) instead of raising.
    """
    try:
        envelope = SearchEnvelope.model_validate(
            raw, context={"strict_pillar_enum": strict_pillar_enum}
        )
    except ValidationError as exc:
        return Failure(ValidationFailed.from_pydantic(exc))
    return Success(envelope.response.results)
