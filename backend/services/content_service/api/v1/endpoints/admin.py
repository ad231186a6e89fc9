"""
Admin API Endpoints

Endpoints:
    POST /admin/login
        Check admin credentials against the hosted admin-login function.
        Returns {"success": true} on acceptance and 401 otherwise.

Note:
    A rejected password and an unreachable login function both return 401;
    the repository does not distinguish them.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger

from services.content_service.api.dependencies import get_content_repository
from services.content_service.api.v1.models import (
    AdminLoginRequest,
    AdminLoginResponse,
)
from services.content_service.database import ContentRepository

router = APIRouter()


@router.post("/admin/login", response_model=AdminLoginResponse)
async def admin_login(
    request: AdminLoginRequest,
    repository: ContentRepository = Depends(get_content_repository),
) -> AdminLoginResponse:
    if not await repository.authenticate_admin(request.username, request.password):
        logger.warning(f"Admin login failed for {request.username}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication failed. Please check your credentials.",
        )
    logger.info(f"Admin login succeeded for {request.username}")
    return AdminLoginResponse(success=True)
