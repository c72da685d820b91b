"""User management and company settings schemas."""

from pydantic import BaseModel, EmailStr, Field

from bakery_pos.models.account import Account
from bakery_pos.models.role import Role


class AccountCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    role: Role
    password: str = Field(..., min_length=4)


class AccountActiveUpdate(BaseModel):
    is_active: bool


class AccountListResponse(BaseModel):
    items: list[Account]
    total: int


class CompanyUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    gst: str | None = None
    logo: str | None = None
