"""
Migração de Base - Database Module
Re-exports all database functions.
"""

# Re-export supabase for test patching compatibility
from config import supabase

from database.paginacao import buscar_todos, em_lotes

from database.insumo import (
    get_insumos_empresa,
    contar_insumos,
    criar_insumo,
    atualizar_insumo,
)

from database.receita_intermediaria import (
    get_itens_receitas,
    remover_itens_receita,
    criar_item_receita,
)

from database.produto import (
    get_produtos_empresa,
    criar_produto,
    atualizar_produto,
)

from database.ficha_tecnica import (
    get_fichas_produto,
    contar_fichas_produtos,
    remover_fichas_produto,
    criar_ficha,
)

from database.preco_canal import (
    get_precos_produto,
    contar_precos_empresa,
    buscar_preco_canal,
    atualizar_preco_canal,
    criar_preco_canal,
)

from database.usuario import (
    usuario_tem_role,
    limpar_cache_roles,
)

__all__ = [
    'buscar_todos',
    'em_lotes',
    # Insumo
    'get_insumos_empresa',
    'contar_insumos',
    'criar_insumo',
    'atualizar_insumo',
    # Receita intermediaria
    'get_itens_receitas',
    'remover_itens_receita',
    'criar_item_receita',
    # Produto
    'get_produtos_empresa',
    'criar_produto',
    'atualizar_produto',
    # Ficha tecnica
    'get_fichas_produto',
    'contar_fichas_produtos',
    'remover_fichas_produto',
    'criar_ficha',
    # Preco canal
    'get_precos_produto',
    'contar_precos_empresa',
    'buscar_preco_canal',
    'atualizar_preco_canal',
    'criar_preco_canal',
    # Usuario
    'usuario_tem_role',
    'limpar_cache_roles',
]
