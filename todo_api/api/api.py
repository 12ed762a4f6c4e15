"""
API router aggregation
Combines all route handlers into a single router
Reference: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""
from fastapi import APIRouter

from todo_api.api.routes import health, todos


api_router = APIRouter()

api_router.include_router(todos.router)
api_router.include_router(health.router)
