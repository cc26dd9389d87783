import pytest

from migracao import gerar_preview

ORIGEM = 'empresa-a'
DESTINO = 'empresa-b'


def seed(db):
    db.seed('insumos',
            {'empresa_id': ORIGEM, 'nome': 'Leite', 'is_intermediario': False},
            {'empresa_id': ORIGEM, 'nome': 'Açúcar', 'is_intermediario': False},
            {'empresa_id': ORIGEM, 'nome': 'Massa', 'is_intermediario': True},
            {'empresa_id': DESTINO, 'nome': 'Ovos', 'is_intermediario': False})
    bolo, torta = db.seed('produtos',
                          {'empresa_id': ORIGEM, 'nome': 'Bolo'},
                          {'empresa_id': ORIGEM, 'nome': 'Torta'})
    outro = db.seed('produtos', {'empresa_id': DESTINO, 'nome': 'Pudim'})
    db.seed('fichas_tecnicas',
            {'produto_id': bolo['id'], 'insumo_id': 'x', 'quantidade': 1},
            {'produto_id': bolo['id'], 'insumo_id': 'y', 'quantidade': 1},
            {'produto_id': torta['id'], 'insumo_id': 'x', 'quantidade': 1},
            {'produto_id': outro['id'], 'insumo_id': 'z', 'quantidade': 1})
    db.seed('precos_canais',
            {'empresa_id': ORIGEM, 'produto_id': bolo['id'], 'canal': 'ifood', 'preco': 30},
            {'empresa_id': ORIGEM, 'produto_id': bolo['id'], 'canal': 'balcao', 'preco': 25},
            {'empresa_id': DESTINO, 'produto_id': outro['id'], 'canal': 'ifood', 'preco': 9})


@pytest.mark.asyncio
async def test_preview_conta_registros_da_origem(fake_db):
    seed(fake_db)

    preview = await gerar_preview(ORIGEM, DESTINO)

    assert preview.to_dict() == {
        'insumos': 2,
        'receitasIntermediarias': 1,
        'produtos': 2,
        'fichasTecnicas': 3,
        'precosCanais': 2,
    }


@pytest.mark.asyncio
async def test_preview_nao_escreve(fake_db):
    seed(fake_db)

    await gerar_preview(ORIGEM, DESTINO)
    await gerar_preview(ORIGEM, DESTINO)

    assert {operacao for _, operacao in fake_db.chamadas} == {'select'}


@pytest.mark.asyncio
async def test_preview_de_empresa_vazia(fake_db):
    preview = await gerar_preview('vazia', DESTINO)

    assert preview.to_dict() == {
        'insumos': 0,
        'receitasIntermediarias': 0,
        'produtos': 0,
        'fichasTecnicas': 0,
        'precosCanais': 0,
    }
    assert ('fichas_tecnicas', 'select') not in fake_db.chamadas
