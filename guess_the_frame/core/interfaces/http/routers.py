"""API router configuration."""

from fastapi import APIRouter

from guess_the_frame.modules.answers.interfaces.router import router as answers_router
from guess_the_frame.modules.catalog.interfaces.router import router as catalog_router
from guess_the_frame.modules.rounds.interfaces.router import router as rounds_router

api_router = APIRouter()

# Catalog index
api_router.include_router(catalog_router)

# Game rounds
api_router.include_router(rounds_router)

# Answer checking
api_router.include_router(answers_router)
