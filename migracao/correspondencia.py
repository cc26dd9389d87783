"""
Correspondência de entidades por nome normalizado.
"""

from typing import Any, Dict, Iterable, Optional

from migracao.normalizacao import normalizar_nome


def encontrar_correspondencia(nome: str, entidades: Iterable[Dict[str, Any]]) -> Optional[Any]:
    """Retorna o id da primeira entidade cujo nome normalizado é igual ao de `nome`.

    Só compara entidades do mesmo tipo (insumo com insumo, produto com produto).
    """
    alvo = normalizar_nome(nome)
    for entidade in entidades:
        if normalizar_nome(entidade.get('nome')) == alvo:
            return entidade['id']
    return None
