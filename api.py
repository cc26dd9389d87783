"""
Migração de Base API
FastAPI app exposing the admin-only base migration between tenants.
"""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from api_pkg.observability import render_metrics
from api_pkg.rate_limit import limiter
from api_pkg.routes.migracao import router as migracao_router
from config import CORS_ORIGINS, init_supabase
from logging_config import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_supabase()
    logger.info("Supabase client initialized")
    yield


app = FastAPI(title="Migração de Base", lifespan=lifespan)
app.state.limiter = limiter

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    request.state.request_id = request.headers.get("x-request-id") or uuid.uuid4().hex
    response = await call_next(request)
    response.headers["X-Request-ID"] = request.state.request_id
    return response


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    campos = [".".join(str(p) for p in err.get("loc", ()) if p != "body") for err in exc.errors()]
    return JSONResponse(status_code=400, content={"error": "invalid request", "fields": campos})


app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.include_router(migracao_router)


@app.get("/")
async def root():
    return {"status": "online", "service": "Migração de Base API"}


@app.get("/metrics", response_class=PlainTextResponse)
async def metrics():
    return render_metrics()
