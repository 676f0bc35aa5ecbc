from pydantic import BaseModel, ConfigDict
from typing import Optional


class UserCreate(BaseModel):
    """Registration payload; extra profile fields are stored as sent."""
    model_config = ConfigDict(extra="allow")

    email: str
    displayName: Optional[str] = None
    phoneNumber: Optional[str] = None
    photoURL: Optional[str] = None


class UserUpsert(BaseModel):
    email: str
    displayName: Optional[str] = None
    phoneNumber: Optional[str] = None
    photoURL: Optional[str] = None


class AdminRoleRequest(BaseModel):
    email: str


class AdminStatusResponse(BaseModel):
    isAdmin: bool
