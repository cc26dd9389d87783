import pytest
from unittest.mock import AsyncMock, patch
from fastapi import HTTPException

from api_pkg.auth import require_admin_context
from api_pkg.observability import get_counter


@pytest.mark.asyncio
@pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer ", "Bearer    "])
async def test_sem_token_bearer_retorna_401(header, fake_db):
    with patch('api_pkg.auth._fetch_user_from_token', new_callable=AsyncMock) as mock_fetch:
        with pytest.raises(HTTPException) as exc:
            await require_admin_context(header)

    assert exc.value.status_code == 401
    mock_fetch.assert_not_called()
    assert fake_db.chamadas == []


@pytest.mark.asyncio
async def test_token_invalido_retorna_401_sem_consultar_roles(fake_db):
    antes = get_counter("auth_failures_total", labels={"reason": "invalid_token"})
    with patch('api_pkg.auth._fetch_user_from_token', new_callable=AsyncMock) as mock_fetch:
        mock_fetch.side_effect = HTTPException(status_code=401, detail="Invalid or expired token")
        with pytest.raises(HTTPException) as exc:
            await require_admin_context("Bearer expirado")

    assert exc.value.status_code == 401
    assert fake_db.chamadas == []
    assert get_counter("auth_failures_total", labels={"reason": "invalid_token"}) == antes + 1


@pytest.mark.asyncio
async def test_usuario_sem_role_admin_retorna_403(fake_db):
    fake_db.seed('user_roles', {'user_id': 'user-1', 'role': 'user'})
    with patch('api_pkg.auth._fetch_user_from_token', new_callable=AsyncMock) as mock_fetch:
        mock_fetch.return_value = {'id': 'user-1', 'email': 'dono@padaria.com'}
        with pytest.raises(HTTPException) as exc:
            await require_admin_context("Bearer valido")

    assert exc.value.status_code == 403


@pytest.mark.asyncio
async def test_admin_recebe_contexto_e_role_fica_em_cache(fake_db):
    fake_db.seed('user_roles', {'user_id': 'admin-1', 'role': 'admin'})
    with patch('api_pkg.auth._fetch_user_from_token', new_callable=AsyncMock) as mock_fetch:
        mock_fetch.return_value = {'id': 'admin-1', 'email': 'admin@saas.com'}
        primeiro = await require_admin_context("Bearer valido")
        segundo = await require_admin_context("Bearer valido")

    assert primeiro.user_id == segundo.user_id == 'admin-1'
    assert primeiro.email == 'admin@saas.com'
    mock_fetch.assert_called_with("valido")
    assert fake_db.chamadas.count(('user_roles', 'select')) == 1
