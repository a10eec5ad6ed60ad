"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from staybook.api.routes import auth, places, bookings, uploads

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(places.router)
api_router.include_router(bookings.router)
api_router.include_router(uploads.router)


@api_router.get("/test")
async def test():
    """Liveness check used by the client."""
    return "test ok"
