import pytest
import requests

from type_provider.client import ProviderClient, get_session_with_retries


def test_session_has_retry_adapters():
    session = get_session_with_retries(retries=5)
    adapter = session.get_adapter("https://example.invalid")
    assert adapter.max_retries.total == 5
    assert 503 in adapter.max_retries.status_forcelist


def test_base_url_is_normalised():
    client = ProviderClient(base_url="http://localhost:8000/", timeout=3)
    assert client.base_url == "http://localhost:8000"
    assert client.timeout == 3


def test_metadata(provider_client):
    assert provider_client.metadata()["data_sources"] == ["type_validate_json"]


def test_schema(provider_client):
    assert "type_validate_json" in provider_client.schema()["data_sources"]


def test_validate_json_valid(provider_client, movie_schema, fixture_text):
    body = provider_client.validate_json(movie_schema, fixture_text("movie"))
    assert body["state"]["is_valid"] is True


def test_validate_json_policy_failure(provider_client, movie_schema, fixture_text):
    body = provider_client.validate_json(movie_schema, fixture_text("movie_empty"), fail_on_validation_error=True)
    assert body["state"] is None
    assert "missing properties 'title', 'director'" in body["diagnostics"][0]["detail"]


def test_unknown_data_source_returns_diagnostics(provider_client):
    body = provider_client.read_data_source("type_nope", {})
    assert body["diagnostics"][0]["severity"] == "error"


def test_unexpected_status_raises(provider_client):
    with pytest.raises(requests.HTTPError):
        provider_client._json(provider_client.request("POST", "/api/metadata"))
