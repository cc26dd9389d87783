import pytest

from migracao import normalizar_nome, encontrar_correspondencia


@pytest.mark.parametrize("nome, esperado", [
    ("Café", "cafe"),
    ("AÇÚCAR REFINADO", "acucar refinado"),
    ("  Pão  de  Queijo!!", "pao de queijo"),
    ("Farinha de Trigo (Tipo 1)", "farinha de trigo tipo 1"),
    ("Leite-Condensado", "leitecondensado"),
    ("", ""),
    ("!!!", ""),
    (None, ""),
])
def test_normalizar_nome(nome, esperado):
    assert normalizar_nome(nome) == esperado


@pytest.mark.parametrize("nome", ["Brigadeiro", "Açaí na Tigela", "pão francês 50g", "Crème Brûlée"])
def test_normalizar_ignora_caixa(nome):
    assert normalizar_nome(nome) == normalizar_nome(nome.upper())


def test_normalizar_equivalencias_de_acento_e_espaco():
    assert normalizar_nome("Café") == normalizar_nome("cafe")
    assert normalizar_nome("  Pão  de  Queijo!!") == normalizar_nome("pao de queijo")


def test_encontrar_correspondencia_retorna_primeiro_igual():
    entidades = [
        {'id': 1, 'nome': 'Manteiga'},
        {'id': 2, 'nome': 'Açúcar Refinado'},
        {'id': 3, 'nome': 'acucar refinado'},
    ]
    assert encontrar_correspondencia('AÇÚCAR REFINADO', entidades) == 2


def test_encontrar_correspondencia_sem_match_parcial():
    entidades = [{'id': 1, 'nome': 'Açúcar Refinado'}]
    assert encontrar_correspondencia('Açúcar', entidades) is None
    assert encontrar_correspondencia('Açúcar', []) is None


def test_nomes_vazios_se_correspondem():
    assert encontrar_correspondencia('???', [{'id': 9, 'nome': ''}]) == 9
