"""Health check endpoint."""

import time
from typing import Callable

from fastapi import APIRouter

from rendergate import __version__
from rendergate.config import get_settings
from rendergate.errors import GateSetupError
from rendergate.files import read_json
from rendergate.models.responses import HealthDependency, HealthResponse
from rendergate.validators.ruleset import load_ruleset
from rendergate.validators.schema_validator import SchemaValidator

router = APIRouter()

_start_time = time.time()


def _probe(path, load: Callable) -> HealthDependency:
    try:
        load(path)
    except GateSetupError as e:
        return HealthDependency(status="unhealthy", path=str(path), message=str(e))
    return HealthDependency(status="healthy", path=str(path))


def _load_schema(label: str) -> Callable:
    def load(path):
        return SchemaValidator(read_json(path, label), label)

    return load


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Gate health: are the configured schemas and ruleset usable?"""
    settings = get_settings()
    dependencies = {
        "contract_schema": _probe(settings.CONTRACT_SCHEMA_PATH, _load_schema("Renderer contract schema")),
        "registry_schema": _probe(settings.REGISTRY_SCHEMA_PATH, _load_schema("Renderer registry schema")),
        "taste_ruleset": _probe(settings.TASTE_RULESET_PATH, load_ruleset),
    }

    all_healthy = all(d.status == "healthy" for d in dependencies.values())

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
        dependencies=dependencies,
    )
