from fastapi import APIRouter

from skillconnect.features.auth.routes.auth import router as auth_router
from skillconnect.features.auth.routes.verify_code import router as verify_code_router

api_router = APIRouter()

# Register all feature routes
api_router.include_router(auth_router)
api_router.include_router(verify_code_router)
