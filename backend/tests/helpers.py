from datetime import datetime, timezone

from bakery_pos.api.auth import login
from bakery_pos.core.deps import get_client, get_session
from bakery_pos.schemas.auth import LoginRequest

NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)


async def sign_in(state, role: str):
    """Log a demo account in and return (client, session)."""
    token = await login(LoginRequest(email=f"{role}@bakery.com", password=role), state=state)
    client = await get_client(token=token.access_token, state=state)
    session = await get_session(client=client)
    return client, session
