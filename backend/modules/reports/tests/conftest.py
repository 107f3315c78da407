# backend/modules/reports/tests/conftest.py

import pytest
from datetime import datetime
from decimal import Decimal
from sqlalchemy.orm import Session

from modules.sales.models.sales_models import Product, Sale, User, UserRole


@pytest.fixture
def sample_users(db_session: Session):
    """Two agents and an admin who never sells"""
    users = [
        User(username="alice", role=UserRole.AGENT, full_name="Alice Agent"),
        User(username="bob", role=UserRole.AGENT, full_name="Bob Agent"),
        User(username="carol", role=UserRole.ADMIN, full_name="Carol Admin"),
    ]
    db_session.add_all(users)
    db_session.commit()
    return users


@pytest.fixture
def sample_products(db_session: Session):
    products = [
        Product(name="Solar Lamp", sku="SL-100", price=Decimal("25.00")),
        Product(name="Water Filter", sku="WF-200", price=Decimal("40.00")),
    ]
    db_session.add_all(products)
    db_session.commit()
    return products


@pytest.fixture
def sample_sales(db_session: Session, sample_users, sample_products):
    """
    Sales spread over three days, including boundary times and a sale
    without a product.
    """
    alice, bob, _ = sample_users
    lamp, filter_ = sample_products

    sales = [
        Sale(user_id=alice.id, product_id=lamp.id, quantity=2, amount=Decimal("50.00"),
             notes="two lamps", created_at=datetime(2024, 1, 1, 0, 0, 0)),
        Sale(user_id=alice.id, product_id=filter_.id, quantity=1, amount=Decimal("40.00"),
             notes="", photo_path="/uploads/1704-receipt.jpg",
             gps_lat=-1.2921, gps_lng=36.8219,
             created_at=datetime(2024, 1, 1, 23, 59, 59)),
        Sale(user_id=bob.id, product_id=lamp.id, quantity=1, amount=Decimal("25.00"),
             notes='said "call back", maybe', created_at=datetime(2024, 1, 2, 12, 30, 0)),
        Sale(user_id=bob.id, product_id=None, quantity=0, amount=Decimal("10.50"),
             notes="service fee", created_at=datetime(2024, 1, 3, 8, 15, 0)),
        Sale(user_id=alice.id, product_id=None, quantity=1, amount=Decimal("5.25"),
             notes="delivery\nsurcharge", created_at=datetime(2023, 12, 31, 23, 59, 59)),
    ]
    db_session.add_all(sales)
    db_session.commit()
    return sales
