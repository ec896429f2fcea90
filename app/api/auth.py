"""
Registration and login endpoints
"""

from fastapi import APIRouter, Depends, status

from app.core.errors import ErrorResponseModel
from app.dependencies.auth import validate_credentials
from app.dependencies.pipeline import RequestContext, guarded
from app.dependencies.services import get_auth_service
from app.schemas.auth import TokenResponse
from app.services.auth import AuthService

router = APIRouter()


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}},
)
async def register(
    ctx: RequestContext = Depends(guarded(validate_credentials)),
    service: AuthService = Depends(get_auth_service),
):
    """Create an account with the default role and return a session token"""
    token = await service.register(ctx.credentials.email, ctx.credentials.password)
    return TokenResponse(token=token)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponseModel}},
)
async def login(
    ctx: RequestContext = Depends(guarded(validate_credentials)),
    service: AuthService = Depends(get_auth_service),
):
    """Exchange email and password for a session token"""
    token = await service.login(ctx.credentials.email, ctx.credentials.password)
    return TokenResponse(token=token)
