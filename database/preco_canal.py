"""
Database functions for precos_canais (per-channel product prices).
"""

from typing import Optional, List, Dict
from config import supabase
from database.paginacao import buscar_todos


async def get_precos_produto(produto_id: str) -> List[Dict]:
    """Obtém os preços por canal de um produto."""
    return await buscar_todos(
        lambda: supabase.table('precos_canais').select('*').eq('produto_id', produto_id).order('id')
    )


async def contar_precos_empresa(empresa_id: str) -> int:
    response = await supabase.table('precos_canais').select('id', count='exact').eq(
        'empresa_id', empresa_id
    ).execute()
    return response.count or 0


async def buscar_preco_canal(produto_id: str, canal: str) -> Optional[Dict]:
    """Busca o preço de um produto em um canal (chave produto_id + canal)."""
    response = await supabase.table('precos_canais').select('id').eq(
        'produto_id', produto_id
    ).eq('canal', canal).limit(1).execute()
    return response.data[0] if response.data else None


async def atualizar_preco_canal(preco_id: str, preco) -> None:
    await supabase.table('precos_canais').update({'preco': preco}).eq('id', preco_id).execute()


async def criar_preco_canal(empresa_id: str, produto_id: str, canal: str, preco) -> Dict:
    response = await supabase.table('precos_canais').insert({
        'empresa_id': empresa_id,
        'produto_id': produto_id,
        'canal': canal,
        'preco': preco,
    }).execute()
    return response.data[0]
