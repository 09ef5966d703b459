"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import admin, calendar, items, profiles, rules, submissions, tools

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    profiles.router, prefix="/users", tags=["Profiles"]
)
api_router.include_router(
    items.router, prefix="/users/{user_id}/items", tags=["Submission items"]
)
api_router.include_router(
    rules.router, prefix="/users/{user_id}/rules", tags=["Submission rules"]
)
api_router.include_router(
    submissions.router, prefix="/users/{user_id}/submissions", tags=["Submissions"]
)
api_router.include_router(
    calendar.router, prefix="/users/{user_id}/calendar", tags=["Calendar"]
)
api_router.include_router(
    admin.router, prefix="/admin", tags=["Admin"]
)
api_router.include_router(
    tools.router, prefix="/tools", tags=["Tools"]
)
