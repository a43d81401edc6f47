from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from catalog.models.product import Product


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get(self, product_id: int) -> Optional[Product]:
        return self.db.query(Product).filter(Product.id == product_id).first()

    def list_all(self) -> List[Product]:
        # natural storage order, no paging
        return self.db.query(Product).all()

    def add(self, fields: Dict[str, Any], now: datetime) -> Product:
        p = Product(**fields, created_at=now, updated_at=now)
        self.db.add(p)
        self.db.flush()  # assigns id
        return p

    def apply(self, product: Product, fields: Dict[str, Any], now: datetime) -> Product:
        """Shallow-merge the supplied fields onto the row; nothing else is touched."""
        for key, value in fields.items():
            setattr(product, key, value)
        product.updated_at = now
        self.db.flush()
        return product

    def delete(self, product: Product) -> None:
        self.db.delete(product)
        self.db.flush()
