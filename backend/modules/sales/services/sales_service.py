# backend/modules/sales/services/sales_service.py

"""
Recording sales and reading the reference data they point at.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.auth import User as AuthUser
from core.error_handling import APIValidationError, StoreUnavailable
from ..models.sales_models import Product, Sale, User
from ..schemas.sales_schemas import ProductCreate, SaleCreate

logger = logging.getLogger(__name__)


class SalesService:
    def __init__(self, db: Session):
        self.db = db

    def record_sale(self, data: SaleCreate, current_user: AuthUser) -> Sale:
        """Persist one sale; the owner defaults to the caller."""
        user_id = data.user_id or current_user.id

        if self.db.get(User, user_id) is None:
            raise APIValidationError("Unknown user", {"user_id": user_id})
        if data.product_id is not None and self.db.get(Product, data.product_id) is None:
            raise APIValidationError("Unknown product", {"product_id": data.product_id})

        sale = Sale(
            user_id=user_id,
            product_id=data.product_id,
            quantity=data.quantity,
            amount=data.amount,
            notes=data.notes,
            photo_path=data.photo_path,
            gps_lat=data.gps_lat,
            gps_lng=data.gps_lng,
        )
        try:
            self.db.add(sale)
            self.db.commit()
            self.db.refresh(sale)
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"Rejected sale for user {user_id}: {e.orig}")
            raise APIValidationError("Sale violates a data constraint")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to record sale for user {user_id}: {e}")
            raise StoreUnavailable("sale recording", str(e))

        logger.info(
            f"Recorded sale {sale.id} for user {user_id} amount={sale.amount} "
            f"by {current_user.username}"
        )
        return sale

    def list_products(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.id).all()

    def create_product(self, data: ProductCreate) -> Product:
        product = Product(name=data.name, sku=data.sku, price=data.price)
        try:
            self.db.add(product)
            self.db.commit()
            self.db.refresh(product)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create product '{data.name}': {e}")
            raise StoreUnavailable("product creation", str(e))
        logger.info(f"Created product {product.id} ({product.name})")
        return product

    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()
