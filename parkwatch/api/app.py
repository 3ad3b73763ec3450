"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from parkwatch.api.routes import floodzone, parks
from parkwatch.api.schemas import HealthResponse
from parkwatch.config import settings


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    yield


app = FastAPI(
    title="ParkWatch",
    description="Mobile home / RV park map with FEMA flood zone overlay",
    version="0.1.0",
    lifespan=lifespan,
)

# Park and flood zone data are public
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)

app.include_router(floodzone.router)
app.include_router(parks.router)


@app.get("/health", response_model=HealthResponse)
async def health():
    return {"status": "ok", "service": "parkwatch"}
