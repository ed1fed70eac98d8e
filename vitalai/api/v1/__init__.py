"""API v1 router aggregation."""

from fastapi import APIRouter

from vitalai.api.v1.endpoints import (
    assessments,
    body,
    dashboard,
    exercises,
    health,
    health_records,
    nutrition,
    tracking,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(body.router, prefix="/body", tags=["body"])
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"])
api_router.include_router(tracking.router, prefix="/tracking", tags=["tracking"])
api_router.include_router(assessments.router, prefix="/assessments", tags=["assessments"])
api_router.include_router(health_records.router, prefix="/health-records", tags=["health-records"])
api_router.include_router(nutrition.router, prefix="/nutrition", tags=["nutrition"])
