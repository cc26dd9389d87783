"""
Normalização de nomes para detecção de duplicados entre empresas.
"""

import re
import unicodedata
from typing import Optional

_DIACRITICOS = re.compile(r'[\u0300-\u036f]')
_NAO_ALFANUMERICO = re.compile(r'[^a-z0-9\s]')
_ESPACOS = re.compile(r'\s+')


def normalizar_nome(nome: Optional[str]) -> str:
    """Forma canônica de um nome: minúsculo, sem acentos, sem pontuação.

    Ex.: "  Pão  de  Queijo!!" -> "pao de queijo". Nomes vazios ou só com
    pontuação normalizam para "" e ainda assim se correspondem entre si.
    """
    texto = (nome or '').lower()
    texto = unicodedata.normalize('NFD', texto)
    texto = _DIACRITICOS.sub('', texto)
    texto = _NAO_ALFANUMERICO.sub('', texto)
    return _ESPACOS.sub(' ', texto).strip()
