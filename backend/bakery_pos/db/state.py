"""In-memory application state.

Catalogue, ledgers, accounts and company settings are shared by every client.
Each signed-in client gets its own local storage, cart and bulk order draft.
"""

import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta

from fastapi import Request

from bakery_pos.core.config import settings
from bakery_pos.models.company import Company
from bakery_pos.models.mixins import utcnow
from bakery_pos.services.bulk_orders import BulkOrderDraft, BulkOrderLedger
from bakery_pos.services.cart import Cart
from bakery_pos.services.company import CompanySettings
from bakery_pos.services.inventory import Inventory
from bakery_pos.services.sales import SalesLedger
from bakery_pos.services.session import LocalStorage, Session
from bakery_pos.services.users import AccountDirectory


@dataclass
class ClientSession:
    id: str
    storage: LocalStorage = field(default_factory=LocalStorage)
    cart: Cart = field(default_factory=Cart)
    bulk_order_draft: BulkOrderDraft = field(default_factory=BulkOrderDraft)
    expires_at: datetime | None = None

    def session(self) -> Session:
        """Session restored from this client's storage."""
        session = Session(self.storage)
        session.load()
        return session

    def is_expired(self, now: datetime | None = None) -> bool:
        return self.expires_at is not None and self.expires_at <= (now or utcnow())


@dataclass
class BakeryState:
    inventory: Inventory = field(default_factory=Inventory)
    sales: SalesLedger = field(default_factory=SalesLedger)
    bulk_orders: BulkOrderLedger = field(default_factory=BulkOrderLedger)
    accounts: AccountDirectory = field(default_factory=AccountDirectory)
    company: CompanySettings = field(
        default_factory=lambda: CompanySettings(Company(name="Bakery"))
    )
    clients: dict[str, ClientSession] = field(default_factory=dict)

    def open_client(self, lifetime: timedelta | None = None) -> ClientSession:
        """Open a client that lives as long as the access token issued for it."""
        now = utcnow()
        self.prune_expired(now)
        lifetime = lifetime or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        client = ClientSession(id=secrets.token_urlsafe(16), expires_at=now + lifetime)
        self.clients[client.id] = client
        return client

    def get_client(self, client_id: str) -> ClientSession | None:
        self.prune_expired()
        return self.clients.get(client_id)

    def prune_expired(self, now: datetime | None = None) -> int:
        """Drop clients whose token has run out; returns how many were dropped."""
        now = now or utcnow()
        expired = [cid for cid, client in self.clients.items() if client.is_expired(now)]
        for cid in expired:
            del self.clients[cid]
        return len(expired)

    def close_client(self, client_id: str) -> None:
        self.clients.pop(client_id, None)


async def get_state(request: Request) -> BakeryState:
    return request.app.state.bakery
