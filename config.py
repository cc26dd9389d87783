"""
Migração de Base - Configurações
Carrega variáveis de ambiente e inicializa conexões.
"""

import os
from cachetools import TTLCache
from dotenv import load_dotenv
from supabase import create_async_client, AsyncClient

# Carrega variáveis de ambiente
load_dotenv()

# Configurações do Supabase
SUPABASE_URL = os.getenv('SUPABASE_URL')
SUPABASE_KEY = os.getenv('SUPABASE_KEY')
SUPABASE_SERVICE_ROLE_KEY = os.getenv('SUPABASE_SERVICE_ROLE_KEY')

# PostgREST corta respostas em max-rows (1000 por padrão)
SUPABASE_PAGE_SIZE = int(os.getenv('SUPABASE_PAGE_SIZE', '1000'))
# Filtros in_ vão na query string; lotes menores mantêm a URL abaixo de ~8 KB
SUPABASE_IN_CHUNK_SIZE = int(os.getenv('SUPABASE_IN_CHUNK_SIZE', '100'))


class _SupabaseProxy:
    """Proxy que delega para o AsyncClient real após init.

    Os módulos fazem `from config import supabase` no import; o proxy
    garante que todas as cópias apontam para o mesmo client real.
    """
    _client: AsyncClient | None = None

    def __getattr__(self, name):
        if self._client is None:
            raise AttributeError(
                f"Supabase not initialized. Call init_supabase() first. "
                f"(Attempted to access '{name}')"
            )
        return getattr(self._client, name)


supabase = _SupabaseProxy()


async def init_supabase():
    """Inicializa o client async com a service role (ignora RLS entre empresas)."""
    if not all([SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY]):
        raise ValueError("Variáveis de ambiente faltando (SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY).")
    supabase._client = await create_async_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)


# Configurações da API
CORS_ORIGINS = [o.strip() for o in os.getenv('CORS_ORIGINS', '*').split(',') if o.strip()]
MIGRACAO_RATE_LIMIT = os.getenv('MIGRACAO_RATE_LIMIT', '10/minute')

# Role exigida para migrar bases entre empresas
ADMIN_ROLE = 'admin'

# Cache de roles (user_id, role) -> bool
roles_cache = TTLCache(maxsize=1000, ttl=int(os.getenv('ROLES_CACHE_TTL', '60')))
