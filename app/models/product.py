from sqlalchemy import Column, Integer, String, Text, Boolean, Numeric, ForeignKey, CheckConstraint, Index
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin

class Product(Base, TimestampMixin):
    __tablename__ = "product"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
        Index("ix_product_tenant_active_created", "tenant_id", "is_active", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    tenant_id = Column(Integer, ForeignKey("tenant.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)
    image_url = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    tenant = relationship("Tenant", back_populates="products")
