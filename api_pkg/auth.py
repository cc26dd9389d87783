"""Authentication and admin authorization helpers for API routes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import aiohttp
from fastapi import Header, HTTPException

from api_pkg.observability import inc_counter
from config import ADMIN_ROLE, SUPABASE_KEY, SUPABASE_SERVICE_ROLE_KEY, SUPABASE_URL
from database import usuario_tem_role


@dataclass
class AdminContext:
    user_id: str
    email: Optional[str]
    raw_user: dict[str, Any]


async def _fetch_user_from_token(access_token: str) -> dict[str, Any]:
    api_key = SUPABASE_KEY or SUPABASE_SERVICE_ROLE_KEY
    if not SUPABASE_URL or not api_key:
        raise HTTPException(status_code=500, detail="Supabase Auth not configured")

    url = f"{SUPABASE_URL}/auth/v1/user"
    headers = {
        "apikey": api_key,
        "Authorization": f"Bearer {access_token}",
    }

    timeout = aiohttp.ClientTimeout(total=10)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        async with session.get(url, headers=headers) as response:
            if response.status != 200:
                raise HTTPException(status_code=401, detail="Invalid or expired token")
            return await response.json()


async def require_admin_context(authorization: Optional[str] = Header(None)) -> AdminContext:
    """Resolves the bearer token to a user and requires the admin role.

    Runs before any tenant data is touched: 401 for a missing or invalid
    token, 403 for an authenticated user without the admin role.
    """
    if not authorization or not authorization.startswith("Bearer "):
        inc_counter("auth_failures_total", labels={"reason": "missing_token"})
        raise HTTPException(status_code=401, detail="Authorization bearer token is required")

    token = authorization.split(" ", 1)[1].strip()
    if not token:
        inc_counter("auth_failures_total", labels={"reason": "missing_token"})
        raise HTTPException(status_code=401, detail="Authorization bearer token is required")

    try:
        user_data = await _fetch_user_from_token(token)
    except HTTPException as exc:
        if exc.status_code == 401:
            inc_counter("auth_failures_total", labels={"reason": "invalid_token"})
        raise

    user_id = str(user_data.get("id") or "")
    if not user_id:
        inc_counter("auth_failures_total", labels={"reason": "invalid_token"})
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    if not await usuario_tem_role(user_id, ADMIN_ROLE):
        inc_counter("auth_failures_total", labels={"reason": "not_admin"})
        raise HTTPException(status_code=403, detail="Admin role required for this action")

    return AdminContext(
        user_id=user_id,
        email=user_data.get("email"),
        raw_user=user_data,
    )
