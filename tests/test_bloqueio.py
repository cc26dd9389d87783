import pytest

from migracao import MigracaoEmAndamento, bloqueio_destino


@pytest.mark.asyncio
async def test_segunda_migracao_para_o_mesmo_destino_e_rejeitada():
    async with bloqueio_destino('empresa-b'):
        with pytest.raises(MigracaoEmAndamento):
            async with bloqueio_destino('empresa-b'):
                pass
        async with bloqueio_destino('empresa-c'):
            pass

    async with bloqueio_destino('empresa-b'):
        pass


@pytest.mark.asyncio
async def test_bloqueio_e_liberado_quando_a_migracao_falha():
    with pytest.raises(RuntimeError):
        async with bloqueio_destino('empresa-b'):
            raise RuntimeError("falha no meio")

    async with bloqueio_destino('empresa-b'):
        pass
