from fastapi import APIRouter
from app.api.routes import (
    health,
    departments,
)

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router, tags=["Health"])
api_router.include_router(departments.router, prefix="/departments", tags=["Departments"])
