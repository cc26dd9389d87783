"""
Database functions for product management.
"""

from typing import List, Dict
from config import supabase
from database.paginacao import buscar_todos


async def get_produtos_empresa(empresa_id: str, colunas: str = '*') -> List[Dict]:
    """Obtém todos os produtos da empresa."""
    return await buscar_todos(
        lambda: supabase.table('produtos').select(colunas).eq('empresa_id', empresa_id).order('id')
    )


async def criar_produto(dados: Dict) -> Dict:
    """Insere um produto e retorna a linha criada."""
    response = await supabase.table('produtos').insert(dados).execute()
    return response.data[0]


async def atualizar_produto(produto_id: str, dados: Dict) -> None:
    await supabase.table('produtos').update(dados).eq('id', produto_id).execute()
