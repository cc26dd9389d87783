"""
Database functions for insumos (ingredients and intermediate recipes).
"""

from typing import Optional, List, Dict
from config import supabase
from database.paginacao import buscar_todos


async def get_insumos_empresa(empresa_id: str, intermediario: Optional[bool] = None, colunas: str = '*') -> List[Dict]:
    """Obtém insumos da empresa, opcionalmente filtrados por is_intermediario."""
    def montar():
        query = supabase.table('insumos').select(colunas).eq('empresa_id', empresa_id)
        if intermediario is not None:
            query = query.eq('is_intermediario', intermediario)
        return query.order('id')

    return await buscar_todos(montar)


async def contar_insumos(empresa_id: str, intermediario: bool) -> int:
    response = await supabase.table('insumos').select('id', count='exact').eq(
        'empresa_id', empresa_id
    ).eq('is_intermediario', intermediario).execute()
    return response.count or 0


async def criar_insumo(dados: Dict) -> Dict:
    """Insere um insumo e retorna a linha criada."""
    response = await supabase.table('insumos').insert(dados).execute()
    return response.data[0]


async def atualizar_insumo(insumo_id: str, dados: Dict) -> None:
    await supabase.table('insumos').update(dados).eq('id', insumo_id).execute()
