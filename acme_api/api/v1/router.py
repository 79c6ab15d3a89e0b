from fastapi import APIRouter

from acme_api.api.routers import quotes

api_router = APIRouter()

api_router.include_router(quotes.router)
