"""
Migração de base (insumos, receitas, produtos, fichas e preços) entre empresas.
"""

from migracao.normalizacao import normalizar_nome
from migracao.correspondencia import encontrar_correspondencia
from migracao.resultado import (
    ContagemEtapa,
    ContagemReceitas,
    ContagemFichas,
    ResultadoMigracao,
    PreviewMigracao,
)
from migracao.preview import gerar_preview
from migracao.copiador import (
    ContextoMigracao,
    migrar_insumos,
    migrar_receitas_intermediarias,
    migrar_produtos,
    migrar_fichas_tecnicas,
    migrar_precos_canais,
    migrar_base,
)
from migracao.bloqueio import (
    MigracaoEmAndamento,
    bloqueio_destino,
)

__all__ = [
    'normalizar_nome',
    'encontrar_correspondencia',
    'ContagemEtapa',
    'ContagemReceitas',
    'ContagemFichas',
    'ResultadoMigracao',
    'PreviewMigracao',
    'gerar_preview',
    'ContextoMigracao',
    'migrar_insumos',
    'migrar_receitas_intermediarias',
    'migrar_produtos',
    'migrar_fichas_tecnicas',
    'migrar_precos_canais',
    'migrar_base',
    'MigracaoEmAndamento',
    'bloqueio_destino',
]
