# backend/modules/reports/routers/__init__.py

from .reports_router import router as reports_router

__all__ = ["reports_router"]
