"""Company profile shown on receipts and the settings screen."""

from pydantic import BaseModel, Field


class Company(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = ""
    phone: str = ""
    email: str = ""
    gst: str | None = None
    logo: str | None = None
