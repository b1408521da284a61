"""Query compiler test fixtures."""

import pytest

from tpbridge.lib.common.schemas import AuthDescriptor
from tpbridge.lib.enums import AuthScheme
from tpbridge.lib.query.builder import QueryBuilder


@pytest.fixture
def basic_auth():
    return AuthDescriptor(scheme=AuthScheme.BASIC)


@pytest.fixture
def api_key_auth():
    return AuthDescriptor(scheme=AuthScheme.API_KEY, token="abc123")


@pytest.fixture
def builder(basic_auth):
    return QueryBuilder(basic_auth)
