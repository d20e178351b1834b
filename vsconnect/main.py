"""
Punto de entrada principal de la aplicación FastAPI.

Este módulo configura e inicia la aplicación FastAPI con sus routers,
middlewares y dependencias necesarias.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from vsconnect.common.config import settings
from vsconnect.common.database import create_tables, engine
from vsconnect.common.logging import setup_logging
from vsconnect.users.api import router as users_router

setup_logging(log_file=settings.LOG_FILE, log_level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Iniciando la aplicación...")
    if settings.DATABASE_CREATE_TABLES:
        await create_tables()

    yield

    logger.info("Apagando la aplicación...")
    await engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="API para la gestión de usuarios de VSConnect",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

if settings.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin) for origin in settings.CORS_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


# Manejo de errores de validación
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Error de validación: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=jsonable_encoder({"detail": exc.errors()}),
    )


app.include_router(users_router, prefix="/usuarios", tags=["usuarios"])

# Imágenes subidas por LocalImageUploader; si la base es una URL externa se sirven fuera
if settings.UPLOAD_BASE_URL.startswith("/"):
    Path(settings.UPLOAD_DIR).mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.UPLOAD_BASE_URL.rstrip("/"),
        StaticFiles(directory=settings.UPLOAD_DIR),
        name="uploads",
    )


@app.get("/health", tags=["health"])
async def health_check():
    return {"status": "healthy"}


# Para ejecutar con uvicorn directamente: uvicorn vsconnect.main:app --reload
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "vsconnect.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info"
    )
