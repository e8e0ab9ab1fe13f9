from fastapi import APIRouter

from api.routes.system import router as system_router
from packages.visitors.routes import router as visitors_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(visitors_router)
