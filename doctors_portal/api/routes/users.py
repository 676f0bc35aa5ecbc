from fastapi import APIRouter, Depends

from ..deps import require_identity, get_user_service
from ...core.security import Identity
from ...services.user_service import UserService
from ...schemas.common import InsertResultResponse, UpdateResultResponse
from ...schemas.user import (
    UserCreate, UserUpsert, AdminRoleRequest, AdminStatusResponse
)

router = APIRouter(prefix="/users", tags=["Users"])

@router.post("", response_model=InsertResultResponse)
def create_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """Save a user coming from the registration page."""
    result = user_service.create_user(user_data)
    return InsertResultResponse.from_result(result)

@router.put("", response_model=UpdateResultResponse)
def upsert_user(
    user_data: UserUpsert,
    user_service: UserService = Depends(get_user_service)
):
    """Create or refresh a user's profile, e.g. after a social sign-in."""
    result = user_service.upsert_user(user_data)
    return UpdateResultResponse.from_result(result)

@router.put("/admin", response_model=UpdateResultResponse)
def set_admin_role(
    request_data: AdminRoleRequest,
    identity: Identity = Depends(require_identity),
    user_service: UserService = Depends(get_user_service)
):
    """Grant the admin role to another user. The caller must be an admin."""
    result = user_service.grant_admin(identity, request_data.email)
    return UpdateResultResponse.from_result(result)

@router.get("/{email}", response_model=AdminStatusResponse)
def get_admin_status(
    email: str,
    user_service: UserService = Depends(get_user_service)
):
    return AdminStatusResponse(isAdmin=user_service.is_admin(email))
