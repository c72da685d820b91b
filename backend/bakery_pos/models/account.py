"""Account model."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from bakery_pos.models.mixins import new_id, utcnow
from bakery_pos.models.role import Role


class Account(BaseModel):
    id: str = Field(default_factory=new_id)
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    # No role-change flow exists; the role is fixed at creation.
    role: Role = Field(..., frozen=True)
    is_active: bool = True
    created_at: datetime = Field(default_factory=utcnow)

    def __repr__(self) -> str:
        return f"<Account {self.email} role={self.role.value}>"
