import json

import azure.functions as func
import pytest

from src.shared.collection_store import CollectionStores, get_stores
from src.shared.settings import AppSettings, get_settings


@pytest.fixture
def stores(tmp_path):
    s = CollectionStores.from_directory(tmp_path)
    s.ensure_all()
    return s


@pytest.fixture
def settings(tmp_path):
    return AppSettings(dataDir=tmp_path)


@pytest.fixture
def app_env(tmp_path, monkeypatch):
    """Point the Functions app at a temp data directory."""
    monkeypatch.setenv("CANVA_DATA_DIR", str(tmp_path))
    get_settings.cache_clear()
    get_stores.cache_clear()
    yield tmp_path
    get_settings.cache_clear()
    get_stores.cache_clear()


def make_request(method, url, body=None, route_params=None, params=None, raw=None):
    if raw is not None:
        data = raw
    elif body is not None:
        data = json.dumps(body).encode("utf-8")
    else:
        data = b""
    return func.HttpRequest(
        method=method,
        url=url,
        headers={"Content-Type": "application/json"},
        params=params or {},
        route_params=route_params or {},
        body=data,
    )


def invoke(function, req):
    """Call a blueprint HTTP function the way the Functions host would."""
    return function.build().get_user_function()(req)


def body_of(resp):
    return json.loads(resp.get_body().decode("utf-8"))
