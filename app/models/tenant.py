from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.database import Base, TimestampMixin

class Tenant(Base, TimestampMixin):
    __tablename__ = "tenant"

    id = Column(Integer, primary_key=True, index=True)
    subdomain = Column(String(63), unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    logo_url = Column(String, nullable=True)
    primary_color = Column(String(7), nullable=True)

    products = relationship(
        "Product",
        back_populates="tenant",
        cascade="all, delete-orphan",
    )
