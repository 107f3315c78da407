# backend/modules/sales/models/sales_models.py

from sqlalchemy import (Column, Integer, String, ForeignKey, Numeric,
                        Text, Float, CheckConstraint)
from sqlalchemy.orm import relationship
from core.database import Base
from core.mixins import TimestampMixin


# Upper bound of the Integer columns below (32-bit signed)
MAX_INTEGER = 2**31 - 1


class UserRole:
    ADMIN = "admin"
    AGENT = "agent"

    ALL = (ADMIN, AGENT)


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.AGENT)
    full_name = Column(String(200), nullable=True)

    sales = relationship("Sale", back_populates="user")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', role='{self.role}')>"


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    sku = Column(String(100), nullable=True, index=True)
    price = Column(Numeric(12, 2), nullable=False, default=0)

    sales = relationship("Sale", back_populates="product")

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', sku='{self.sku}')>"


class Sale(Base, TimestampMixin):
    """A single recorded sales transaction; never updated once written."""

    __tablename__ = "sales"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_sales_quantity_non_negative"),
        CheckConstraint("amount >= 0", name="ck_sales_amount_non_negative"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"),
                     nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"),
                        nullable=True, index=True)
    quantity = Column(Integer, nullable=False, default=1)
    amount = Column(Numeric(12, 2), nullable=False)
    notes = Column(Text, nullable=False, default="")

    # Opaque reference produced by the photo storage collaborator
    photo_path = Column(String(500), nullable=True)

    gps_lat = Column(Float, nullable=True)
    gps_lng = Column(Float, nullable=True)

    user = relationship("User", back_populates="sales")
    product = relationship("Product", back_populates="sales")

    def __repr__(self):
        return f"<Sale(id={self.id}, user_id={self.user_id}, amount={self.amount})>"
