import logging
import os
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI

from api.v1 import contact as contact_api
from api.v1 import content as content_api
from api.v1 import navigator as navigator_api
from services.site import PortfolioSite


load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    site = getattr(app.state, "site", None) or PortfolioSite.from_env()
    site.initialize()
    app.state.site = site
    logger.info("Portfolio API ready")
    yield
    site.shutdown()
    logger.info("Portfolio API stopped")


def create_app(site: PortfolioSite | None = None) -> FastAPI:
    app = FastAPI(title="Portfolio API", lifespan=lifespan)
    if site is not None:
        app.state.site = site
    app.include_router(content_api.router)
    app.include_router(navigator_api.router)
    app.include_router(contact_api.router)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
