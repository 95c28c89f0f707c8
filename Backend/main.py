# -*- coding: utf-8 -*-
"""
NeuroSynth Backend - FastAPI Main Application
Synthetic neurological patient records with optional LLM narratives
"""

import os
import uvicorn
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from neurosynth import __version__
from neurosynth.api import router as neurosynth_router
from neurosynth.config import get_config
from neurosynth.knowledge.catalog import CONDITIONS
from neurosynth.main import get_engine
from neurosynth.utils.error_handler import GENERIC_ERROR_MESSAGE, sanitize_error_message
from neurosynth.utils.logger import configure_logging, get_logger

_config = get_config()
configure_logging(_config.features.log_level, to_file=_config.features.log_to_file)

log = get_logger("backend.main")

# ============================================
# Lifespan Event Handler
# ============================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info(f"🚀 NeuroSynth Backend v{__version__} starting")
    log.info("=" * 60)
    log.info(f"📦 Conditions: {len(CONDITIONS)}")
    log.info(f"🔑 LLM narratives: {'enabled' if _config.llm_enabled else 'offline template'}")
    log.info("🔗 Endpoints:")
    log.info("   - Generate: POST /api/generate")
    log.info("   - Insights: POST /api/insights")
    log.info("   - Assessment: POST /api/assessment")
    log.info("   - Guide: GET /api/guide/{condition}")
    log.info("   - Health: GET /healthz")
    log.info("=" * 60)

    get_engine()

    yield


app = FastAPI(
    title="NeuroSynth Backend",
    version=__version__,
    description="Synthetic neurological patient record generator",
    lifespan=lifespan
)

# ============================================
# CORS Configuration
# ============================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ALLOW_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================
# Include Routers
# ============================================
app.include_router(neurosynth_router)

# ============================================
# Exception Handlers
# ============================================

@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    log.warning(f"⚠️ Input validation error: {exc}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "validation_error",
            "message": sanitize_error_message(exc)
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """
    Catch-all: the client only ever sees a generic message
    """
    log.error(f"❌ Unhandled exception: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_error",
            "message": GENERIC_ERROR_MESSAGE
        }
    )

# ============================================
# Health Check
# ============================================
@app.get("/healthz")
async def healthz():
    return {
        "ok": True,
        "service": "neurosynth-backend",
        "version": __version__,
        "llm": "enabled" if get_config().llm_enabled else "offline",
    }


@app.get("/")
async def root():
    return {
        "message": f"NeuroSynth Backend v{__version__}",
        "docs": "/docs",
        "health": "/healthz",
        "endpoints": {
            "generate": "/api/generate",
            "conditions": "/api/conditions",
            "guide": "/api/guide",
            "insights": "/api/insights",
            "assessment": "/api/assessment"
        }
    }


# ============================================
# Main Entry Point
# ============================================
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=bool(os.getenv("RELOAD", "0") == "1"),
        workers=int(os.getenv("WORKERS", "1")),
        log_level=os.getenv("LOG_LEVEL", "info"),
    )
