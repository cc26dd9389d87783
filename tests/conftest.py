import pytest
from unittest.mock import AsyncMock, MagicMock
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

import config
from database import limpar_cache_roles
from fake_supabase import FakeSupabase


@pytest.fixture
def mock_supabase():
    """Mocks the Supabase async client."""
    # The final object that execute() is called on
    query_builder = MagicMock()

    # Result object returned by await execute()
    result_obj = MagicMock()
    result_obj.data = []
    result_obj.count = 0

    query_builder.execute = AsyncMock(return_value=result_obj)

    # The chainable methods on query_builder should return query_builder itself
    for metodo in ('table', 'select', 'eq', 'neq', 'order', 'limit', 'range', 'in_',
                   'insert', 'update', 'delete'):
        getattr(query_builder, metodo).return_value = query_builder

    client = MagicMock()
    client.table.return_value = query_builder
    return client


@pytest.fixture
def mock_config(mock_supabase, monkeypatch):
    """Points the shared supabase proxy at the MagicMock client."""
    monkeypatch.setattr(config.supabase, '_client', mock_supabase)
    limpar_cache_roles()
    yield monkeypatch
    limpar_cache_roles()


@pytest.fixture
def fake_db(monkeypatch):
    """Points the shared supabase proxy at a stateful in-memory database."""
    db = FakeSupabase()
    monkeypatch.setattr(config.supabase, '_client', db)
    limpar_cache_roles()
    yield db
    limpar_cache_roles()
