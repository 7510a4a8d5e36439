from __future__ import annotations

import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from . import db
from .config import Settings, load_settings
from .errors import AtuaPJError
from .logs import LoggerFactory
from .routes import router


logger = LoggerFactory.get_logger("atuapj.api")


def _cors_options(settings: Settings) -> dict:
    origins = settings.cors_origins()
    if origins is None:
        # Sem FRONTEND_URL: reflete qualquer origem (apenas para desenvolvimento local)
        return {"allow_origin_regex": ".*"}
    return {"allow_origins": origins}


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()
    logger.setLevel(settings.log_level)
    if settings.db_path:
        db.configure(settings.db_path)
    db.init_db()
    if settings.cors_origins() is None:
        logger.warning("FRONTEND_URL não definido: CORS liberado para qualquer origem.")

    app = FastAPI(title="AtuaPJ API")
    app.state.settings = settings
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        **_cors_options(settings),
    )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "no-referrer")
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": list(e.get("loc", ())), "msg": e.get("msg", ""), "type": e.get("type", "")}
            for e in exc.errors()
        ]
        return JSONResponse(status_code=400, content={"detail": jsonable_encoder(errors)})

    @app.exception_handler(AtuaPJError)
    async def domain_error(request: Request, exc: AtuaPJError):
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    app.include_router(router)
    return app


class _Server(uvicorn.Server):
    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info("Application is running on: http://%s:%s", self.config.host, self.config.port)


def _serve(app: FastAPI, settings: Settings) -> bool:
    """Serve até o shutdown; False quando o uvicorn não chegou a subir (lifespan ou bind)."""
    config = uvicorn.Config(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    server = _Server(config)
    server.run()
    return server.started


def run() -> None:
    try:
        settings = load_settings()
        app = create_app(settings)
        started = _serve(app, settings)
    except SystemExit as exc:
        # uvicorn encerra com o próprio código quando não consegue abrir a porta
        if exc.code in (0, None):
            raise
        logger.error("Falha ao iniciar a aplicação (uvicorn saiu com %s)", exc.code)
        sys.exit(1)
    except Exception:
        logger.exception("Falha ao iniciar a aplicação")
        sys.exit(1)
    if not started:
        logger.error("Falha ao iniciar a aplicação em %s:%s", settings.host, settings.port)
        sys.exit(1)


if __name__ == "__main__":
    run()
