from __future__ import annotations

import httpx
import pytest

from conjunto.api_client import ApiClient
from conjunto.navigation import Navigator
from conjunto.resources import ConjuntoApi
from conjunto.storage import MemoryStorage

from tests.fake_backend import create_app

BASE_URL = "http://testserver/api"


@pytest.fixture
def backend():
    return create_app()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def navigator():
    return Navigator(current_path="/dashboard")


@pytest.fixture
async def client(backend, storage, navigator):
    transport = httpx.ASGITransport(app=backend)
    async with ApiClient(base_url=BASE_URL, storage=storage, navigator=navigator, transport=transport) as api_client:
        yield api_client


@pytest.fixture
def api(client):
    return ConjuntoApi(client)


@pytest.fixture
def make_mock_client(storage, navigator):
    """Cliente cuyo transporte es una función: sirve para forzar estados y fallos de red"""
    def factory(handler, **kwargs):
        api_client = ApiClient(
            base_url=BASE_URL,
            storage=kwargs.pop("storage", storage),
            navigator=kwargs.pop("navigator", navigator),
            transport=httpx.MockTransport(handler),
            **kwargs,
        )
        return api_client

    return factory
