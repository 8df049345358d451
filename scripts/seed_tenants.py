"""
python -m scripts.seed_tenants
"""

import sys
from decimal import Decimal

sys.path.insert(0, ".")

from dotenv import load_dotenv
load_dotenv()

from app.database import SessionLocal
from app.crud import tenant as tenant_crud
from app.models.product import Product
from app.core.subdomain import sanitize_subdomain, is_valid_subdomain


DEMO_TENANTS = [
    ("Alice's Bakery", "alice", "#f59e0b", [
        ("Sourdough Loaf", "Naturally leavened, baked daily", "6.50"),
        ("Croissant", "All-butter, flaky", "3.25"),
    ]),
    ("Bob's Bikes", "bob", "#10b981", [
        ("Inner Tube", "700x25c, presta valve", "8.99"),
        ("Tune-up", "Gears, brakes and a wash", "45.00"),
    ]),
]


def seed_tenants():
    """Add demo tenants with a few products each. Existing subdomains are skipped."""
    db = SessionLocal()

    try:
        for name, requested, color, products in DEMO_TENANTS:
            subdomain = sanitize_subdomain(requested)
            if not is_valid_subdomain(subdomain):
                print(f"Skipped: invalid subdomain {requested!r}")
                continue
            if tenant_crud.get_by_subdomain(db, subdomain):
                print(f"Skipped: {subdomain} already exists")
                continue

            tenant = tenant_crud.create(db, name=name, subdomain=subdomain, primary_color=color)
            for product_name, description, price in products:
                db.add(Product(
                    tenant_id=tenant.id,
                    name=product_name,
                    description=description,
                    price=Decimal(price),
                    is_active=True,
                ))
            db.commit()
            print(f"Added: {name} ({subdomain}) with {len(products)} products")

    except Exception as e:
        db.rollback()
        print(f"Error: {e}")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_tenants()
