"""Authentication endpoints: login, logout, current account."""

from fastapi import APIRouter, Depends, HTTPException, status

from bakery_pos.core import rbac
from bakery_pos.core.deps import get_client, get_session
from bakery_pos.core.security import create_access_token
from bakery_pos.db.state import BakeryState, ClientSession, get_state
from bakery_pos.models.mixins import utcnow
from bakery_pos.schemas.auth import CurrentAccount, LoginRequest, TokenResponse
from bakery_pos.services.session import Session

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(body: LoginRequest, state: BakeryState = Depends(get_state)):
    """Authenticate via email + password and open a client session."""
    client = state.open_client()
    session = Session(client.storage)
    if not session.login(state.accounts, body.email, body.password):
        state.close_client(client.id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )

    account = session.account
    token = create_access_token(
        account_id=account.id,
        session_id=client.id,
        role=account.role.value,
        expires_delta=client.expires_at - utcnow(),
    )
    return TokenResponse(access_token=token, user_id=account.id, role=account.role)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    client: ClientSession = Depends(get_client),
    state: BakeryState = Depends(get_state),
):
    """Clear the stored account; the token stops working."""
    client.session().logout()
    state.close_client(client.id)


@router.get("/me", response_model=CurrentAccount)
async def get_me(session: Session = Depends(get_session)):
    """Return the signed-in account with its permissions and visible screens."""
    account = session.account
    return CurrentAccount(
        id=account.id,
        name=account.name,
        email=account.email,
        role=account.role,
        permissions=sorted(rbac.permissions_for(account.role), key=lambda p: p.value),
        screens=rbac.accessible_screens(account),
        is_active=account.is_active,
    )
