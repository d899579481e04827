"""API v1 routes."""

from fastapi import APIRouter

from versex.api.v1 import auth, devices, health, logs, roles, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(roles.router, prefix="/roles", tags=["roles"])
router.include_router(devices.router, prefix="/devices", tags=["devices"])
router.include_router(logs.router, prefix="/logs", tags=["logs"])
