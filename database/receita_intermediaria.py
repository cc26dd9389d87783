"""
Database functions for receitas_intermediarias (composite recipe lines).
"""

from typing import List, Dict
from config import supabase
from database.paginacao import buscar_todos, em_lotes


async def get_itens_receitas(insumo_ids: List[str]) -> List[Dict]:
    """Obtém as linhas de todas as receitas intermediárias informadas."""
    itens: List[Dict] = []
    for lote in em_lotes(insumo_ids):
        itens.extend(await buscar_todos(
            lambda lote=lote: supabase.table('receitas_intermediarias').select('*').in_('insumo_id', lote).order('id')
        ))
    return itens


async def remover_itens_receita(insumo_id: str) -> None:
    """Remove todas as linhas que compõem uma receita intermediária."""
    await supabase.table('receitas_intermediarias').delete().eq('insumo_id', insumo_id).execute()


async def criar_item_receita(insumo_id: str, ingrediente_id: str, quantidade) -> Dict:
    response = await supabase.table('receitas_intermediarias').insert({
        'insumo_id': insumo_id,
        'insumo_ingrediente_id': ingrediente_id,
        'quantidade': quantidade,
    }).execute()
    return response.data[0]
