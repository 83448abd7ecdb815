"""API route handlers."""

from .matches import router as matches_router
from .matching import router as matching_router
