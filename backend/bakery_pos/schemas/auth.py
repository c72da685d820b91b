"""Auth request/response schemas."""

from pydantic import BaseModel, EmailStr

from bakery_pos.core.rbac import Screen
from bakery_pos.models.role import Permission, Role


# ── Login ──────────────────────────────────────────
class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user_id: str
    role: Role


# ── Current Account ────────────────────────────────
class CurrentAccount(BaseModel):
    id: str
    name: str
    email: str
    role: Role
    permissions: list[Permission]
    screens: list[Screen]
    is_active: bool
