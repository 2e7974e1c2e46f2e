"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from rendergate.api.gates import router as gates_router
from rendergate.api.health import router as health_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Contract and taste gates
api_router.include_router(gates_router, tags=["Gates"])
