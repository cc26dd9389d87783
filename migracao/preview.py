"""
Preview da migração: contagens na empresa de origem, sem escrita.
"""

from database import (
    contar_insumos,
    get_produtos_empresa,
    contar_fichas_produtos,
    contar_precos_empresa,
)
from logging_config import logger
from migracao.resultado import PreviewMigracao


async def gerar_preview(empresa_origem_id: str, empresa_destino_id: str) -> PreviewMigracao:
    """Conta o que uma migração de origem -> destino tocaria.

    Apenas lê a empresa de origem; o destino só aparece no log.
    """
    logger.info(f"[migrate-base] Preview: {empresa_origem_id} -> {empresa_destino_id}")

    produtos = await get_produtos_empresa(empresa_origem_id, colunas='id')
    produto_ids = [p['id'] for p in produtos]

    return PreviewMigracao(
        insumos=await contar_insumos(empresa_origem_id, intermediario=False),
        receitas_intermediarias=await contar_insumos(empresa_origem_id, intermediario=True),
        produtos=len(produto_ids),
        fichas_tecnicas=await contar_fichas_produtos(produto_ids),
        precos_canais=await contar_precos_empresa(empresa_origem_id),
    )
