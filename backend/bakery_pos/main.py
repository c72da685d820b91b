import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bakery_pos import __version__
from bakery_pos.api import api_router
from bakery_pos.core.config import settings
from bakery_pos.db.seed_demo import seed_demo_data
from bakery_pos.db.state import BakeryState

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


def create_app(state: BakeryState | None = None) -> FastAPI:
    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        description="Point of sale and inventory for a single bakery",
        version=__version__,
    )

    # CORS - restrict in production via env
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if state is None:
        state = BakeryState()
        if settings.SEED_DEMO_DATA:
            seed_demo_data(state)
    app.state.bakery = state

    app.include_router(api_router)

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
