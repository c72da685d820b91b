"""Dependency injection: token → client session, permission gates, error mapping."""

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError

from bakery_pos.core import rbac
from bakery_pos.core.exceptions import BakeryError, ConflictError, NotFoundError
from bakery_pos.core.security import decode_access_token
from bakery_pos.db.state import BakeryState, ClientSession, get_state
from bakery_pos.models.role import Permission
from bakery_pos.services.session import Session

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


def _credentials_exception() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_client(
    token: str = Depends(oauth2_scheme),
    state: BakeryState = Depends(get_state),
) -> ClientSession:
    """Decode JWT and return the client session it names. Raises 401 if unknown."""
    try:
        payload = decode_access_token(token)
        client_id = payload["sid"]
        account_id = payload["sub"]
    except (JWTError, KeyError):
        raise _credentials_exception()

    client = state.get_client(client_id)
    if client is None:
        raise _credentials_exception()
    account = client.session().account
    if account is None or account.id != account_id:
        raise _credentials_exception()
    return client


async def get_session(client: ClientSession = Depends(get_client)) -> Session:
    return client.session()


def require_any_permission(*allowed: Permission):
    """Dependency factory: passes when the account holds ANY of ``allowed``."""

    async def checker(session: Session = Depends(get_session)) -> Session:
        if not any(session.has_permission(p) for p in allowed):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Missing permissions: {' or '.join(p.value for p in allowed)}",
            )
        return session

    return checker


def require_screen(screen: rbac.Screen):
    """Dependency factory: gate on a screen's allow-list."""
    return require_any_permission(*rbac.SCREEN_PERMISSIONS[screen])


def http_exception_from(exc: BakeryError) -> HTTPException:
    if isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ConflictError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST
    return HTTPException(status_code=code, detail=f"{exc.title}: {exc.detail}")
