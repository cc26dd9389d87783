"""
Contagens retornadas por preview e migração.
"""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class ContagemEtapa:
    copied: int = 0
    updated: int = 0
    skipped: int = 0
    errors: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'copied': self.copied,
            'updated': self.updated,
            'skipped': self.skipped,
            'errors': self.errors,
        }


@dataclass
class ContagemReceitas(ContagemEtapa):
    # Linhas de receita cujo ingrediente não foi migrado
    lines_skipped: int = 0

    def to_dict(self) -> Dict[str, int]:
        dados = super().to_dict()
        dados['linesSkipped'] = self.lines_skipped
        return dados


@dataclass
class ContagemFichas:
    """Fichas técnicas são sempre recriadas, então não há 'updated'."""
    copied: int = 0
    skipped: int = 0
    errors: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {'copied': self.copied, 'skipped': self.skipped, 'errors': self.errors}


@dataclass
class ResultadoMigracao:
    insumos: ContagemEtapa = field(default_factory=ContagemEtapa)
    receitas_intermediarias: ContagemReceitas = field(default_factory=ContagemReceitas)
    produtos: ContagemEtapa = field(default_factory=ContagemEtapa)
    fichas_tecnicas: ContagemFichas = field(default_factory=ContagemFichas)
    precos_canais: ContagemEtapa = field(default_factory=ContagemEtapa)

    def etapas(self) -> Dict[str, Any]:
        return {
            'insumos': self.insumos,
            'receitasIntermediarias': self.receitas_intermediarias,
            'produtos': self.produtos,
            'fichasTecnicas': self.fichas_tecnicas,
            'precosCanais': self.precos_canais,
        }

    @property
    def total_erros(self) -> int:
        return sum(c.errors for c in self.etapas().values())

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {nome: contagem.to_dict() for nome, contagem in self.etapas().items()}


@dataclass
class PreviewMigracao:
    insumos: int = 0
    receitas_intermediarias: int = 0
    produtos: int = 0
    fichas_tecnicas: int = 0
    precos_canais: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            'insumos': self.insumos,
            'receitasIntermediarias': self.receitas_intermediarias,
            'produtos': self.produtos,
            'fichasTecnicas': self.fichas_tecnicas,
            'precosCanais': self.precos_canais,
        }
