"""Client session: the signed-in account kept in local storage.

The account is stored as one JSON document under a fixed key. ``load`` restores
it when a client (re)connects, ``login`` writes it and ``logout`` removes it.
"""

import logging

from pydantic import ValidationError

from bakery_pos.core import rbac
from bakery_pos.core.config import settings
from bakery_pos.models.account import Account
from bakery_pos.models.role import Permission

logger = logging.getLogger(__name__)


class LocalStorage:
    """String key/value store with the browser localStorage interface."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._items


class Session:
    def __init__(self, storage: LocalStorage, key: str | None = None) -> None:
        self.storage = storage
        self.key = key or settings.SESSION_STORAGE_KEY
        self._account: Account | None = None

    @property
    def account(self) -> Account | None:
        return self._account

    @property
    def is_authenticated(self) -> bool:
        return self._account is not None

    def load(self) -> Account | None:
        raw = self.storage.get_item(self.key)
        if raw is None:
            self._account = None
            return None
        try:
            self._account = Account.model_validate_json(raw)
        except ValidationError:
            logger.warning("Discarding unreadable session record under %s", self.key)
            self.storage.remove_item(self.key)
            self._account = None
        return self._account

    def login(self, directory, email: str, password: str) -> bool:
        """Authenticate against ``directory`` and persist the account on success."""
        account = directory.authenticate(email, password)
        if account is None:
            logger.warning("Failed login for %s", email)
            return False
        if not account.is_active:
            logger.warning("Login refused for deactivated account %s", email)
            return False
        self._account = account
        self.storage.set_item(self.key, account.model_dump_json())
        logger.info("%s signed in as %s", account.email, account.role.value)
        return True

    def logout(self) -> None:
        if self._account is not None:
            logger.info("%s signed out", self._account.email)
        self._account = None
        self.storage.remove_item(self.key)

    def has_permission(self, permission: Permission | str) -> bool:
        return rbac.has_permission(self._account, permission)

    def can_access(self, screen: rbac.Screen) -> bool:
        return rbac.can_access(self._account, screen)
