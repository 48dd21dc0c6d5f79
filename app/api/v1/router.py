from fastapi import APIRouter

from app.api.routers import policies, quotations

api_router = APIRouter()

api_router.include_router(quotations.router)
api_router.include_router(policies.router)
