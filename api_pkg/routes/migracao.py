"""
Base migration routes.
Preview counts and executes the copy of a tenant's base into another tenant.
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict, Field

from api_pkg.auth import AdminContext, require_admin_context
from api_pkg.observability import inc_counter, timed
from api_pkg.rate_limit import limiter
from config import MIGRACAO_RATE_LIMIT
from logging_config import logger
from migracao import MigracaoEmAndamento, ResultadoMigracao, bloqueio_destino, gerar_preview, migrar_base

router = APIRouter(prefix="/api", tags=["migracao"])

ACTIONS = {"preview", "migrate"}


class MigracaoRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    action: str
    empresa_origem_id: str = Field(alias="empresaOrigemId", min_length=1)
    empresa_destino_id: str = Field(alias="empresaDestinoId", min_length=1)


def _registrar_metricas(resultado: ResultadoMigracao) -> None:
    for etapa, contagem in resultado.etapas().items():
        for status, valor in contagem.to_dict().items():
            if valor:
                inc_counter("migracao_registros_total", valor, labels={"etapa": etapa, "status": status})


@router.post("/migrate-base")
@limiter.limit(MIGRACAO_RATE_LIMIT)
async def migrate_base(
    request: Request,
    req: MigracaoRequest,
    admin: AdminContext = Depends(require_admin_context),
):
    request_id = getattr(request.state, "request_id", "n/a")
    if req.action not in ACTIONS:
        raise HTTPException(status_code=400, detail="invalid action")
    if req.empresa_origem_id == req.empresa_destino_id:
        raise HTTPException(status_code=400, detail="source and destination tenants must differ")

    log_extra = {
        "request_id": request_id,
        "user_id": admin.user_id,
        "empresa_origem_id": req.empresa_origem_id,
        "empresa_destino_id": req.empresa_destino_id,
    }

    try:
        if req.action == "preview":
            preview = await gerar_preview(req.empresa_origem_id, req.empresa_destino_id)
            inc_counter("migracao_preview_total")
            return {"preview": preview.to_dict()}

        logger.info("Migration requested request_id=%s user=%s", request_id, admin.user_id, extra=log_extra)
        async with bloqueio_destino(req.empresa_destino_id):
            with timed("migracao_duration_seconds"):
                resultado = await migrar_base(req.empresa_origem_id, req.empresa_destino_id)
    except MigracaoEmAndamento as exc:
        inc_counter("migracao_conflict_total")
        raise HTTPException(status_code=409, detail=str(exc))
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Migration error request_id=%s action=%s", request_id, req.action, extra=log_extra)
        inc_counter("migracao_failed_total", labels={"action": req.action})
        raise HTTPException(status_code=500, detail=str(exc))

    _registrar_metricas(resultado)
    inc_counter("migracao_success_total")
    if resultado.total_erros:
        logger.warning(
            "Migration finished with %s record errors request_id=%s", resultado.total_erros, request_id, extra=log_extra
        )
    return {"success": True, "result": resultado.to_dict()}
