# CAPI search: build the request URL, fetch once, validate the payload.
import logging
from functools import partial
from urllib.parse import urlencode, urljoin

import requests

from .fetching import fetch_json
from .outcome import FetchOutcome, Success, describe
from .schemas import SearchResult, validate
from .settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)

def build_search_url(query: str, settings: Settings) -> str:
    if not query:
        raise ValueError("query must be a non-empty string")
    params = {
        "q": query,
        "orderBy": settings.ORDER_BY,
        "page-size": str(settings.PAGE_SIZE),
        "show-fields": ",".join(settings.SHOW_FIELDS),
        "api-key": settings.CAPI_API_KEY,
    }
    return urljoin(settings.CAPI_BASE_URL, "search") + "?" + urlencode(params)

def search(
    query: str | None,
    *,
    settings: Settings | None = None,
    session: requests.Session | None = None,
) -> FetchOutcome[tuple[SearchResult, ...]]:
    settings = settings or default_settings
    query = (query or "").strip()
    if not query:
        return Success(())

    outcome = fetch_json(
        build_search_url(query, settings),
        parser=partial(validate, strict_pillar_enum=settings.STRICT_PILLAR_ENUM),
        session=session,
        timeout=settings.REQUEST_TIMEOUT,
    )
    if outcome.ok:
        logger.info("search %r: %d result(s)", query, len(outcome.value))
    else:
        logger.warning("search %r failed (%s)", query, describe(outcome))
    return outcome
