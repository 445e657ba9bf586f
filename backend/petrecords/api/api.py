"""Module: api."""

from fastapi import APIRouter

from petrecords.api.routes.pets import router as pets_router

api_router = APIRouter()

# Pet pages are served from the site root.
api_router.include_router(pets_router, tags=["pets"])
