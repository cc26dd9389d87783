"""
Migração de base entre empresas.

Copia insumos, receitas intermediárias, produtos, fichas técnicas e preços
por canal da empresa de origem para a de destino, casando registros pelo
nome normalizado (atualiza se existir, cria se não existir). Cada etapa
termina antes da próxima começar, pois depende dos mapas de ids
(origem -> destino) construídos pelas anteriores.

Não é transacional: um erro inesperado interrompe a migração e deixa o
destino parcialmente migrado. Rodar de novo é seguro, já que tudo o que
foi copiado passa a casar por nome e é apenas atualizado.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

from postgrest.exceptions import APIError

from database import (
    get_insumos_empresa,
    criar_insumo,
    atualizar_insumo,
    get_itens_receitas,
    remover_itens_receita,
    criar_item_receita,
    get_produtos_empresa,
    criar_produto,
    atualizar_produto,
    get_fichas_produto,
    remover_fichas_produto,
    criar_ficha,
    get_precos_produto,
    buscar_preco_canal,
    atualizar_preco_canal,
    criar_preco_canal,
)
from logging_config import logger
from migracao.correspondencia import encontrar_correspondencia
from migracao.resultado import ContagemEtapa, ResultadoMigracao

# id na origem -> id no destino
MapaIds = Dict[Any, Any]

CAMPOS_INSUMO = ('unidade_medida', 'custo_unitario', 'estoque_minimo')
CAMPOS_RECEITA = CAMPOS_INSUMO + ('rendimento_receita',)
CAMPOS_PRODUTO = ('preco_venda', 'categoria', 'rendimento_padrao', 'observacoes_ficha', 'ativo', 'imagem_url')


@dataclass(frozen=True)
class ContextoMigracao:
    """Estado de uma única chamada de migração. Nunca reutilizado."""
    empresa_origem_id: str
    empresa_destino_id: str
    resultado: ResultadoMigracao = field(default_factory=ResultadoMigracao)


def _copiar_campos(registro: Dict, campos) -> Dict:
    return {campo: registro.get(campo) for campo in campos}


async def _atualizar_ou_criar(
    contagem: ContagemEtapa,
    descricao: str,
    existente_id: Optional[Any],
    atualizar: Callable[[Any], Awaitable[None]],
    criar: Callable[[], Awaitable[Dict]],
) -> Optional[Any]:
    """Aplica a regra casa-ou-cria a um registro e retorna o id no destino.

    Falhas do banco neste registro são contadas em `errors` e não
    interrompem a etapa; o registro fica fora do mapa de ids.
    """
    try:
        if existente_id is not None:
            await atualizar(existente_id)
            contagem.updated += 1
            return existente_id

        novo = await criar()
        contagem.copied += 1
        return novo['id']
    except APIError as e:
        contagem.errors += 1
        logger.warning(f"[migrate-base] Falha ao migrar {descricao}: {e.message}")
        return None


# ========== 1. INSUMOS SIMPLES ==========

async def migrar_insumos(ctx: ContextoMigracao, insumos_destino: List[Dict]) -> MapaIds:
    """Etapa 1: insumos com is_intermediario = false.

    `insumos_destino` é o retrato do destino tirado antes da migração.
    """
    logger.info('[migrate-base] Step 1: Migrando insumos simples...')
    contagem = ctx.resultado.insumos
    mapa_insumos: MapaIds = {}

    candidatos = [i for i in insumos_destino if not i.get('is_intermediario')]
    origem = await get_insumos_empresa(ctx.empresa_origem_id, intermediario=False)

    for insumo in origem:
        def criar(insumo=insumo):
            return criar_insumo({
                'empresa_id': ctx.empresa_destino_id,
                'nome': insumo['nome'],
                **_copiar_campos(insumo, CAMPOS_INSUMO),
                'estoque_atual': 0,
                'is_intermediario': False,
            })

        def atualizar(existente_id, insumo=insumo):
            return atualizar_insumo(existente_id, _copiar_campos(insumo, CAMPOS_INSUMO))

        destino_id = await _atualizar_ou_criar(
            contagem,
            f"insumo '{insumo['nome']}'",
            encontrar_correspondencia(insumo['nome'], candidatos),
            atualizar,
            criar,
        )
        if destino_id is not None:
            mapa_insumos[insumo['id']] = destino_id

    logger.info(f"[migrate-base] Insumos: {contagem.copied} copiados, {contagem.updated} atualizados, {contagem.errors} erros")
    return mapa_insumos


# ========== 2. RECEITAS INTERMEDIÁRIAS ==========

async def migrar_receitas_intermediarias(
    ctx: ContextoMigracao,
    insumos_destino: List[Dict],
    mapa_insumos: MapaIds,
) -> MapaIds:
    """Etapa 2: insumos com is_intermediario = true e suas linhas de receita.

    Recebe o mapa da etapa 1 e devolve uma cópia estendida com as receitas.
    Primeiro casa ou cria todas as receitas, depois apaga e recria as linhas
    de cada uma, para que uma receita possa usar qualquer outra como ingrediente.
    """
    logger.info('[migrate-base] Step 2: Migrando receitas intermediárias...')
    contagem = ctx.resultado.receitas_intermediarias
    mapa_insumos = dict(mapa_insumos)

    candidatos = [i for i in insumos_destino if i.get('is_intermediario')]
    receitas = await get_insumos_empresa(ctx.empresa_origem_id, intermediario=True)
    itens = await get_itens_receitas([r['id'] for r in receitas])

    itens_por_receita: Dict[Any, List[Dict]] = {}
    for item in itens:
        itens_por_receita.setdefault(item['insumo_id'], []).append(item)

    migradas = []
    for receita in receitas:
        def criar(receita=receita):
            return criar_insumo({
                'empresa_id': ctx.empresa_destino_id,
                'nome': receita['nome'],
                **_copiar_campos(receita, CAMPOS_RECEITA),
                'estoque_atual': 0,
                'is_intermediario': True,
            })

        def atualizar(existente_id, receita=receita):
            return atualizar_insumo(existente_id, _copiar_campos(receita, CAMPOS_RECEITA))

        receita_destino_id = await _atualizar_ou_criar(
            contagem,
            f"receita '{receita['nome']}'",
            encontrar_correspondencia(receita['nome'], candidatos),
            atualizar,
            criar,
        )
        if receita_destino_id is not None:
            mapa_insumos[receita['id']] = receita_destino_id
            migradas.append((receita, receita_destino_id))

    for receita, receita_destino_id in migradas:
        try:
            await remover_itens_receita(receita_destino_id)
        except APIError as e:
            contagem.errors += 1
            logger.warning(f"[migrate-base] Falha ao limpar receita '{receita['nome']}': {e.message}")
            continue

        for item in itens_por_receita.get(receita['id'], []):
            ingrediente_destino_id = mapa_insumos.get(item['insumo_ingrediente_id'])
            if ingrediente_destino_id is None:
                contagem.lines_skipped += 1
                logger.warning(
                    f"[migrate-base] Receita '{receita['nome']}': ingrediente "
                    f"{item['insumo_ingrediente_id']} não migrado, linha ignorada"
                )
                continue
            try:
                await criar_item_receita(receita_destino_id, ingrediente_destino_id, item['quantidade'])
            except APIError as e:
                contagem.errors += 1
                logger.warning(f"[migrate-base] Falha ao copiar linha da receita '{receita['nome']}': {e.message}")

    logger.info(
        f"[migrate-base] Receitas: {contagem.copied} copiadas, {contagem.updated} atualizadas, "
        f"{contagem.lines_skipped} linhas ignoradas, {contagem.errors} erros"
    )
    return mapa_insumos


# ========== 3. PRODUTOS ==========

async def migrar_produtos(ctx: ContextoMigracao) -> MapaIds:
    """Etapa 3: produtos. Nunca copia estoque_acabado."""
    logger.info('[migrate-base] Step 3: Migrando produtos...')
    contagem = ctx.resultado.produtos
    mapa_produtos: MapaIds = {}

    origem = await get_produtos_empresa(ctx.empresa_origem_id)
    candidatos = await get_produtos_empresa(ctx.empresa_destino_id, colunas='id, nome')

    for produto in origem:
        def criar(produto=produto):
            return criar_produto({
                'empresa_id': ctx.empresa_destino_id,
                'nome': produto['nome'],
                **_copiar_campos(produto, CAMPOS_PRODUTO),
                'estoque_acabado': 0,
            })

        def atualizar(existente_id, produto=produto):
            return atualizar_produto(existente_id, _copiar_campos(produto, CAMPOS_PRODUTO))

        destino_id = await _atualizar_ou_criar(
            contagem,
            f"produto '{produto['nome']}'",
            encontrar_correspondencia(produto['nome'], candidatos),
            atualizar,
            criar,
        )
        if destino_id is not None:
            mapa_produtos[produto['id']] = destino_id

    logger.info(f"[migrate-base] Produtos: {contagem.copied} copiados, {contagem.updated} atualizados, {contagem.errors} erros")
    return mapa_produtos


# ========== 4. FICHAS TÉCNICAS ==========

async def migrar_fichas_tecnicas(ctx: ContextoMigracao, mapa_insumos: MapaIds, mapa_produtos: MapaIds) -> None:
    """Etapa 4: recria a ficha técnica de cada produto migrado.

    Linhas cujo insumo não foi migrado são contadas como skipped.
    """
    logger.info('[migrate-base] Step 4: Migrando fichas técnicas...')
    contagem = ctx.resultado.fichas_tecnicas

    for produto_origem_id, produto_destino_id in mapa_produtos.items():
        try:
            await remover_fichas_produto(produto_destino_id)
        except APIError as e:
            contagem.errors += 1
            logger.warning(f"[migrate-base] Falha ao limpar ficha do produto {produto_destino_id}: {e.message}")
            continue

        for ficha in await get_fichas_produto(produto_origem_id):
            insumo_destino_id = mapa_insumos.get(ficha['insumo_id'])
            if insumo_destino_id is None:
                contagem.skipped += 1
                logger.warning(
                    f"[migrate-base] Produto {produto_origem_id}: insumo {ficha['insumo_id']} "
                    f"não migrado, linha da ficha ignorada"
                )
                continue
            try:
                await criar_ficha(produto_destino_id, insumo_destino_id, ficha['quantidade'])
                contagem.copied += 1
            except APIError as e:
                contagem.errors += 1
                logger.warning(f"[migrate-base] Falha ao copiar ficha do produto {produto_destino_id}: {e.message}")

    logger.info(f"[migrate-base] Fichas técnicas: {contagem.copied} copiadas, {contagem.skipped} puladas, {contagem.errors} erros")


# ========== 5. PREÇOS DE CANAIS ==========

async def migrar_precos_canais(ctx: ContextoMigracao, mapa_produtos: MapaIds) -> None:
    """Etapa 5: upsert de preços pela chave (produto no destino, canal)."""
    logger.info('[migrate-base] Step 5: Migrando preços de canais...')
    contagem = ctx.resultado.precos_canais

    for produto_origem_id, produto_destino_id in mapa_produtos.items():
        for preco in await get_precos_produto(produto_origem_id):
            existente = await buscar_preco_canal(produto_destino_id, preco['canal'])

            def criar(preco=preco, produto_destino_id=produto_destino_id):
                return criar_preco_canal(ctx.empresa_destino_id, produto_destino_id, preco['canal'], preco['preco'])

            def atualizar(existente_id, preco=preco):
                return atualizar_preco_canal(existente_id, preco['preco'])

            await _atualizar_ou_criar(
                contagem,
                f"preço '{preco['canal']}' do produto {produto_destino_id}",
                existente['id'] if existente else None,
                atualizar,
                criar,
            )

    logger.info(f"[migrate-base] Preços canais: {contagem.copied} copiados, {contagem.updated} atualizados, {contagem.errors} erros")


async def migrar_base(empresa_origem_id: str, empresa_destino_id: str) -> ResultadoMigracao:
    """Executa as cinco etapas em ordem e retorna as contagens.

    Não verifica permissões: quem chama deve garantir que o usuário é admin.
    """
    logger.info(f"[migrate-base] Migrating: {empresa_origem_id} -> {empresa_destino_id}")
    ctx = ContextoMigracao(empresa_origem_id, empresa_destino_id)

    insumos_destino = await get_insumos_empresa(empresa_destino_id, colunas='id, nome, is_intermediario')

    mapa_insumos = await migrar_insumos(ctx, insumos_destino)
    mapa_insumos = await migrar_receitas_intermediarias(ctx, insumos_destino, mapa_insumos)
    mapa_produtos = await migrar_produtos(ctx)
    await migrar_fichas_tecnicas(ctx, mapa_insumos, mapa_produtos)
    await migrar_precos_canais(ctx, mapa_produtos)

    logger.info('[migrate-base] Migração concluída com sucesso!')
    return ctx.resultado
