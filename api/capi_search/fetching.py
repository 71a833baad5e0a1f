import logging
from typing import Any, Callable, Mapping, Optional

import requests
from urllib.parse import urlsplit

from .outcome import (
    DeserializationError,
    Failure,
    FetchOutcome,
    Issue,
    TransportError,
    T,
    ValidationFailed,
)

logger = logging.getLogger(__name__)


def _where(url: str) -> str:
    # keeps the api key out of the logs
    return urlsplit(url)._replace(query="").geturl()


Parser = Callable[[Any], FetchOutcome[T]]


def fetch_json(
    url: str,
    *,
    parser: Parser,
    headers: Optional[Mapping[str, str]] = None,
    session: Optional[requests.Session] = None,
    timeout: float | None = None,
) -> FetchOutcome[T]:
    """
    GET `url` once, decode the body as JSON and hand it to `parser`.

    - Network failures come back as `Failure(TransportError)`.
    - A body that is not JSON, or too deeply nested to decode, comes back
      as `Failure(DeserializationError)`.
    - The HTTP status is not checked: CAPI error bodies are JSON too and
      the parser rejects them on their `status` field.
    - Whatever `parser` returns is returned as is.
    """
    http = session or requests
    try:
        r = http.get(url, headers=dict(headers or {}), timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("GET %s failed: %s", _where(url), exc)
        return Failure(TransportError(_where(url), exc))

    logger.debug("GET %s -> HTTP %s", _where(url), r.status_code)
    try:
        data = r.json()
    except (ValueError, RecursionError) as exc:
        # RecursionError: valid JSON nested deeper than the decoder allows
        logger.warning("GET %s returned a non-JSON body (HTTP %s)", _where(url), r.status_code)
        return Failure(DeserializationError(_where(url), r.status_code, exc))

    try:
        return parser(data)
    except Exception as exc:
        logger.exception("parser raised instead of returning a failure")
        return Failure(ValidationFailed([Issue(loc=(), message=str(exc), kind="parser_error")]))
