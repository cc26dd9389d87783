"""
Leitura paginada de tabelas do Supabase.
"""

from typing import Callable, Iterator, List, Dict, Any
from config import SUPABASE_PAGE_SIZE, SUPABASE_IN_CHUNK_SIZE


async def buscar_todos(montar_query: Callable[[], Any], tamanho_pagina: int = None) -> List[Dict]:
    """Executa a query página a página via range() até esgotar os resultados.

    `montar_query` deve devolver um builder novo a cada chamada, já filtrado.
    """
    tamanho = tamanho_pagina or SUPABASE_PAGE_SIZE
    registros: List[Dict] = []
    inicio = 0
    while True:
        response = await montar_query().range(inicio, inicio + tamanho - 1).execute()
        pagina = response.data or []
        registros.extend(pagina)
        if len(pagina) < tamanho:
            return registros
        inicio += tamanho


def em_lotes(ids: List[Any], tamanho: int = None) -> Iterator[List[Any]]:
    """Divide uma lista de ids em lotes para filtros in_."""
    tamanho = tamanho or SUPABASE_IN_CHUNK_SIZE
    for inicio in range(0, len(ids), tamanho):
        yield ids[inicio:inicio + tamanho]
