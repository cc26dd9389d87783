"""
Migra a base (insumos, receitas, produtos, fichas e preços) de uma empresa para outra.

Uso:
    # Apenas contagens, sem escrita
    python scripts/migrar_base.py <empresa_origem_id> <empresa_destino_id> --dry-run

    # Migração (pede confirmação)
    python scripts/migrar_base.py <empresa_origem_id> <empresa_destino_id>

Requer SUPABASE_URL e SUPABASE_SERVICE_ROLE_KEY no ambiente (.env).
"""

import argparse
import asyncio
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from config import init_supabase
from logging_config import logger
from migracao import bloqueio_destino, gerar_preview, migrar_base


def _imprimir_tabela(titulo: str, linhas: dict):
    print(f"\n{titulo}")
    print("=" * 60)
    for nome, valor in linhas.items():
        print(f"{nome:<24} {valor}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Migra a base de uma empresa para outra.")
    parser.add_argument("origem", help="ID da empresa de origem")
    parser.add_argument("destino", help="ID da empresa de destino")
    parser.add_argument("--dry-run", action="store_true", help="Só mostra o preview, sem escrever")
    parser.add_argument("--yes", "-y", action="store_true", help="Não pede confirmação")
    return parser


async def executar(origem: str, destino: str, dry_run: bool = False, confirmar=input) -> int:
    if origem == destino:
        print("Origem e destino devem ser empresas diferentes.")
        return 2

    await init_supabase()

    preview = await gerar_preview(origem, destino)
    _imprimir_tabela(f"PREVIEW {origem} -> {destino}", preview.to_dict())
    if dry_run:
        return 0

    if confirmar and confirmar("\nConfirmar migração? [s/N] ").strip().lower() not in ("s", "sim", "y", "yes"):
        print("Migração cancelada.")
        return 1

    async with bloqueio_destino(destino):
        resultado = await migrar_base(origem, destino)

    _imprimir_tabela("RESULTADO", {nome: contagem for nome, contagem in resultado.to_dict().items()})
    if resultado.total_erros:
        logger.warning(f"Migração concluída com {resultado.total_erros} erros por registro; rode novamente para completar.")
        return 3
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(executar(
        args.origem,
        args.destino,
        dry_run=args.dry_run,
        confirmar=None if args.yes else input,
    ))


if __name__ == "__main__":
    sys.exit(main())
