"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..core.config import get_settings
from ..core.controller import get_controller
from ..core.log import configure_logging
from .routes import metrics_router, simulations_router, workloads_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    configure_logging()

    # Startup
    controller = await get_controller()
    await controller.initialize()

    yield

    # Shutdown
    await controller.shutdown()


app = FastAPI(
    title="FTLSim API",
    description="""
    FTLSim - Flash Translation Layer Simulator

    - **Translation**: logical-to-physical unit mapping
    - **Wear Leveling**: least-worn-first allocation with unit retirement
    - **Statistics**: wear distribution after each workload run
    """,
    version=__version__,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(simulations_router, prefix="/api/v1")
app.include_router(workloads_router, prefix="/api/v1")
app.include_router(metrics_router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "FTLSim API",
        "version": __version__,
        "description": "Flash Translation Layer Simulator",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    controller = await get_controller()
    sink_stats = await controller.sink.get_stats()

    return {
        "status": "healthy",
        "device_size": sink_stats["size_bytes"],
    }


def run():
    """Run the API server."""
    settings = get_settings()
    uvicorn.run(
        "ftlsim.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
