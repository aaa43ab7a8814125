"""
Top-level routers.

``router`` aggregates the domain routers and is mounted under the API
prefix; ``root_router`` holds the service description and favicon
routes served from the site root.
"""

from fastapi import APIRouter

from .endpoints import auth, events, health, participants


router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(auth.router, tags=["auth"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(participants.router, prefix="/participants", tags=["participants"])

root_router = health.root_router
