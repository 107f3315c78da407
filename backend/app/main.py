from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.database import engine
from core.error_handling import register_exception_handlers
from app.startup import configure_startup_logging, run_startup_checks

# ========== Field Sales ==========
from modules.sales.routes.sales_routes import router as sales_router

# ========== Reports & Notifications ==========
from modules.reports import __version__ as reports_version
from modules.reports.routers import reports_router

# ========== Settings & Configuration ==========
from modules.settings.routes.settings_routes import router as settings_router

configure_startup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    run_startup_checks(settings, engine)
    yield


app = FastAPI(
    title="Field Sales API",
    description="""
    Field sales capture and reporting.

    ## Features

    * **Sales capture** - Agents record amount, quantity, product, photo reference and GPS position
    * **Listing** - Filtered, newest-first sales listing (capped)
    * **Summary** - Grand total with per-user and per-product rankings
    * **Export** - Uncapped CSV export of the filtered listing
    * **Notifications** - Sales target alerts for administrators

    ## Filters

    Listing, summary and export accept `from`, `to` (YYYY-MM-DD, inclusive),
    `user_id` and `product_id`; all optional and combinable.

    ## Authentication

    Endpoints require a bearer JWT. Administrative endpoints require the
    `admin` role.
    """,
    version=reports_version,
    lifespan=lifespan,
)

# Register exception handlers for consistent error responses
register_exception_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(sales_router)
app.include_router(reports_router)
app.include_router(settings_router)


@app.get("/health", tags=["Health"])
def health_check():
    return {
        "status": "healthy",
        "service": "field-sales",
        "timestamp": datetime.utcnow().isoformat(),
        "version": reports_version,
    }
