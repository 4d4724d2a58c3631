import os
from urllib.parse import urlsplit

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from type_provider.client import ProviderClient
from type_provider.config import load_config, merge_config
from type_provider.documents import load_document_text
from type_provider.provider import TypeProvider
from type_provider.server import create_app

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "tests", "fixtures")
TEST_BASE_URL = "http://provider.test"


class FlaskAdapter(BaseAdapter):
    """Route requests sent through a requests.Session into a Flask test client."""

    def __init__(self, app):
        super().__init__()
        self.client = app.test_client()

    def send(self, request, **kwargs):
        url = urlsplit(request.url)
        headers = {}
        if request.headers.get("Content-Type"):
            headers["Content-Type"] = request.headers["Content-Type"]
        flask_resp = self.client.open(
            url.path, method=request.method, data=request.body, headers=headers, query_string=url.query
        )
        resp = requests.Response()
        resp.status_code = flask_resp.status_code
        resp._content = flask_resp.get_data()
        resp.headers = CaseInsensitiveDict(flask_resp.headers)
        resp.encoding = "utf-8"
        resp.url = request.url
        resp.request = request
        return resp

    def close(self):
        pass


@pytest.fixture(scope="session")
def config():
    config_path = os.path.join(os.path.dirname(__file__), "config.yaml")
    return load_config(config_path)


@pytest.fixture(scope="session")
def merged_config(config):
    """Return config.yaml overlaid with defaults and environment variables."""
    return merge_config(config)


@pytest.fixture
def fixture_text():
    """Load the raw text of a file under tests/fixtures by name."""
    def _load(name):
        return load_document_text(name, [FIXTURES_DIR])
    return _load


@pytest.fixture
def movie_schema(fixture_text):
    return fixture_text("movie.schema")


@pytest.fixture
def provider():
    return TypeProvider(version="test")


@pytest.fixture
def app(provider):
    app = create_app(provider)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def flask_client(app):
    return app.test_client()


@pytest.fixture
def provider_client(app):
    """ProviderClient whose session talks to the Flask app in-process."""
    session = requests.Session()
    session.mount(TEST_BASE_URL, FlaskAdapter(app))
    return ProviderClient(base_url=TEST_BASE_URL, session=session)
