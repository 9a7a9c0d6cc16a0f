from fastapi import APIRouter

from app.domains.credit.api.routes import credits_router, customers_router

api_router = APIRouter()

# API routes (all have the API_V1_STR prefix from the app factory)
api_router.include_router(customers_router)
api_router.include_router(credits_router)
