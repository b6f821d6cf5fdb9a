import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from golfcartly.api import brands, vehicle_models, wiring_diagrams, parts, suppliers, cart, gps, search, health
from golfcartly.core.config import settings
from golfcartly.core.database import init_db
from golfcartly.core.errors import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class SPAStaticFiles(StaticFiles):
    """Static bundle that answers unknown non-API paths with index.html."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as e:
            if e.status_code != 404 or path.split("/", 1)[0] == "api":
                raise
            return await super().get_response("index.html", scope)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Golfcartly API ({settings.ENVIRONMENT})")
    init_db()
    yield
    logger.info("Golfcartly API stopped")


app = FastAPI(
    title="Golfcartly API",
    description="Golf cart catalog, parts cart and GPS route API",
    version="1.0.0",
    lifespan=lifespan,
)

register_exception_handlers(app)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/health", tags=["Health"])
app.include_router(brands.router, prefix="/api/brands", tags=["Brands"])
app.include_router(vehicle_models.router, prefix="/api/models", tags=["Models"])
app.include_router(wiring_diagrams.router, prefix="/api/wiring-diagrams", tags=["Wiring Diagrams"])
app.include_router(parts.router, prefix="/api/parts", tags=["Parts"])
app.include_router(suppliers.router, prefix="/api/suppliers", tags=["Suppliers"])
app.include_router(cart.router, prefix="/api/cart", tags=["Cart"])
app.include_router(gps.router, prefix="/api/gps", tags=["GPS"])
app.include_router(search.router, prefix="/api/search", tags=["Search"])

if settings.is_production:
    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/", SPAStaticFiles(directory=static_dir, html=True), name="client")
        logger.info(f"Serving frontend from {static_dir.resolve()}")
    else:
        logger.warning(f"Static directory {static_dir} not found; frontend will not be served")
else:
    logger.info("Running in development mode - the frontend dev server handles the UI")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("golfcartly.main:app", host=settings.HOST, port=settings.PORT)
