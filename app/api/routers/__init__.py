"""
app/api/routers package marker.
"""

from app.api.routers.attendees import router as attendees_router
from app.api.routers.events import router as events_router
from app.api.routers.sessions import router as sessions_router

__all__ = [
    "attendees_router",
    "events_router",
    "sessions_router",
]
