from .sales_models import User, Product, Sale, UserRole

__all__ = ["User", "Product", "Sale", "UserRole"]
