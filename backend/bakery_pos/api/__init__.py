from fastapi import APIRouter

from bakery_pos.api import auth, bulk_orders, company, inventory, reports, sales, screens, users

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(screens.router)
api_router.include_router(inventory.router)
api_router.include_router(sales.router)
api_router.include_router(bulk_orders.router)
api_router.include_router(reports.router)
api_router.include_router(users.router)
api_router.include_router(company.router)
