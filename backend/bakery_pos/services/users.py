"""Account directory used for sign-in and user management."""

import logging

from bakery_pos.core.exceptions import ConflictError, NotFoundError
from bakery_pos.core.security import hash_password, verify_password
from bakery_pos.models.account import Account
from bakery_pos.models.role import Role

logger = logging.getLogger(__name__)


class AccountDirectory:
    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._password_hashes: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._accounts)

    def all(self) -> list[Account]:
        return list(self._accounts.values())

    def get(self, account_id: str) -> Account:
        try:
            return self._accounts[account_id]
        except KeyError:
            raise NotFoundError("User not found") from None

    def find_by_email(self, email: str) -> Account | None:
        for account in self._accounts.values():
            if account.email == email:
                return account
        return None

    def add(self, account: Account, password: str) -> Account:
        if self.find_by_email(account.email) is not None:
            raise ConflictError("Email already registered")
        self._accounts[account.id] = account
        self._password_hashes[account.id] = hash_password(password)
        return account

    def create(self, name: str, email: str, role: Role, password: str) -> Account:
        account = self.add(Account(name=name, email=email, role=role), password)
        logger.info("Account %s created with role %s", account.email, account.role.value)
        return account

    def authenticate(self, email: str, password: str) -> Account | None:
        account = self.find_by_email(email)
        if account is None:
            return None
        if not verify_password(password, self._password_hashes[account.id]):
            return None
        return account

    def set_active(self, account_id: str, is_active: bool) -> Account:
        account = self.get(account_id)
        account.is_active = is_active
        logger.info("Account %s active=%s", account.email, is_active)
        return account

    def active_count(self) -> int:
        return sum(1 for a in self._accounts.values() if a.is_active)
