"""Unit tests for company settings."""

import pytest
from fastapi import HTTPException

from bakery_pos.api import company as company_api
from bakery_pos.core.deps import require_screen
from bakery_pos.core.rbac import Screen
from bakery_pos.schemas.user import CompanyUpdate

from tests.helpers import sign_in


@pytest.mark.asyncio
async def test_update_company_merges_fields(state):
    _, admin = await sign_in(state, "admin")
    body = CompanyUpdate(phone="+91 98765 00000", gst="29XYZAB9876K1Z2")

    company = await company_api.update_company(body, session=admin, state=state)

    assert company.name == "Sweet Crumbs Bakery"
    assert company.phone == "+91 98765 00000"
    assert state.company.get().gst == "29XYZAB9876K1Z2"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [{"name": None}, {"address": None}])
async def test_update_company_null_required_field_returns_422(state, payload):
    _, admin = await sign_in(state, "admin")
    body = CompanyUpdate.model_validate(payload)

    with pytest.raises(HTTPException) as exc_info:
        await company_api.update_company(body, session=admin, state=state)

    assert exc_info.value.status_code == 422
    assert state.company.get().name == "Sweet Crumbs Bakery"


@pytest.mark.asyncio
async def test_staff_cannot_open_company_settings(state):
    _, staff = await sign_in(state, "staff")
    with pytest.raises(HTTPException) as exc_info:
        await require_screen(Screen.COMPANY)(session=staff)
    assert exc_info.value.status_code == 403
