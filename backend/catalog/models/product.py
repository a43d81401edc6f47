import enum

from sqlalchemy import Column, DateTime, Enum, Float, Integer, String, Text

from catalog.db import Base


class ProductStatus(str, enum.Enum):
    available = "available"
    unavailable = "unavailable"


class Product(Base):
    __tablename__ = "products"
    # never hand out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    image_url = Column(String(255), nullable=True)
    category = Column(String(255), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    status = Column(
        Enum(ProductStatus, native_enum=False, length=255),
        nullable=False,
        default=ProductStatus.available,
    )
    # naive UTC, set by the service layer
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Product id={self.id} name={self.name}>"
