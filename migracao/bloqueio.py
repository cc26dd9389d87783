"""
Exclusão mútua de migrações por empresa de destino (escopo: processo).
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Dict

_bloqueios: Dict[str, asyncio.Lock] = {}


class MigracaoEmAndamento(Exception):
    """Já existe uma migração rodando para a empresa de destino."""

    def __init__(self, empresa_destino_id: str):
        super().__init__(f"Migração já em andamento para a empresa {empresa_destino_id}")
        self.empresa_destino_id = empresa_destino_id


@asynccontextmanager
async def bloqueio_destino(empresa_destino_id: str):
    """Mantém o destino bloqueado durante a migração; falha na hora se já estiver."""
    lock = _bloqueios.setdefault(empresa_destino_id, asyncio.Lock())
    if lock.locked():
        raise MigracaoEmAndamento(empresa_destino_id)
    async with lock:
        try:
            yield
        finally:
            _bloqueios.pop(empresa_destino_id, None)
