from urllib.parse import parse_qs, urlsplit

import pytest
import requests

from capi_search.outcome import TransportError
from capi_search.schemas import Pillar
from capi_search.search import build_search_url, search
from capi_search.settings import Settings

from conftest import make_payload, make_result


@pytest.fixture
def settings():
    return Settings(CAPI_API_KEY="my-key", REQUEST_TIMEOUT=5)


def test_build_search_url_sets_fixed_parameters(settings):
    url = build_search_url("climate change & you", settings)

    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://content.guardianapis.com/search"
    assert parse_qs(parts.query) == {
        "q": ["climate change & you"],
        "orderBy": ["newest"],
        "page-size": ["24"],
        "show-fields": ["thumbnail,trailText,byline"],
        "api-key": ["my-key"],
    }


def test_build_search_url_encodes_query(settings):
    url = build_search_url("a&b=c d", settings)
    assert "q=a%26b%3Dc+d" in url


def test_build_search_url_refuses_empty_query(settings):
    with pytest.raises(ValueError):
        build_search_url("", settings)


@pytest.mark.parametrize("query", [None, "", "   "])
def test_empty_query_never_touches_the_network(fake_get, settings, query):
    fake = fake_get(body=make_payload([make_result()]))

    outcome = search(query, settings=settings)

    assert outcome.ok is True
    assert outcome.value == ()
    assert fake.calls == []


def test_search_makes_exactly_one_request(fake_get, settings):
    fake = fake_get(body=make_payload([make_result(), make_result(pillarId="pillar/opinion")]))

    outcome = search("climate", settings=settings)

    assert outcome.ok
    assert [r.pillar_id for r in outcome.value] == [Pillar.NEWS, Pillar.OPINION]
    assert len(fake.calls) == 1
    assert parse_qs(urlsplit(fake.calls[0]["url"]).query)["q"] == ["climate"]
    assert fake.calls[0]["timeout"] == 5


def test_search_with_empty_results(fake_get, settings):
    fake_get(body={"response": {"status": "ok", "results": []}})
    outcome = search("climate", settings=settings)
    assert outcome.ok
    assert outcome.value == ()


def test_search_transport_failure_is_an_outcome(fake_get, settings):
    fake_get(exc=requests.ConnectionError("no route to host"))
    outcome = search("climate", settings=settings)
    assert outcome.ok is False
    assert isinstance(outcome.error, TransportError)


def test_pillar_policy_follows_settings(fake_get):
    fake_get(body=make_payload([make_result(pillarId="pillar/labs")]))

    strict = search("labs", settings=Settings(STRICT_PILLAR_ENUM=True))
    loose = search("labs", settings=Settings(STRICT_PILLAR_ENUM=False))

    assert strict.ok is False
    assert loose.ok is True
    assert loose.value[0].pillar_id is None
