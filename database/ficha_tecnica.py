"""
Database functions for fichas técnicas (product recipe lines).
"""

from typing import List, Dict
from config import supabase
from database.paginacao import buscar_todos, em_lotes


async def get_fichas_produto(produto_id: str) -> List[Dict]:
    """Obtém a ficha técnica completa de um produto."""
    return await buscar_todos(
        lambda: supabase.table('fichas_tecnicas').select('*').eq('produto_id', produto_id).order('id')
    )


async def contar_fichas_produtos(produto_ids: List[str]) -> int:
    """Conta as linhas de ficha técnica dos produtos informados."""
    total = 0
    for lote in em_lotes(produto_ids):
        response = await supabase.table('fichas_tecnicas').select('id', count='exact').in_(
            'produto_id', lote
        ).execute()
        total += response.count or 0
    return total


async def remover_fichas_produto(produto_id: str) -> None:
    await supabase.table('fichas_tecnicas').delete().eq('produto_id', produto_id).execute()


async def criar_ficha(produto_id: str, insumo_id: str, quantidade) -> Dict:
    response = await supabase.table('fichas_tecnicas').insert({
        'produto_id': produto_id,
        'insumo_id': insumo_id,
        'quantidade': quantidade,
    }).execute()
    return response.data[0]
