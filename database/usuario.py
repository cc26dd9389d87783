"""
Database functions for user role lookups.
"""

from config import supabase, roles_cache


async def usuario_tem_role(user_id: str, role: str) -> bool:
    """Verifica em user_roles se o usuário possui a role (com cache TTL)."""
    chave = (user_id, role)
    if chave in roles_cache:
        return roles_cache[chave]

    response = await supabase.table('user_roles').select('role').eq(
        'user_id', user_id
    ).eq('role', role).limit(1).execute()

    tem_role = bool(response.data)
    roles_cache[chave] = tem_role
    return tem_role


def limpar_cache_roles():
    """Limpa o cache de roles."""
    roles_cache.clear()
