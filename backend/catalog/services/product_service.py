import re
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from catalog.models.product import Product
from catalog.repositories.product_repo import ProductRepository
from catalog.schemas.product_schema import FieldError
from catalog.services.product_validator import validate_product
from catalog.utils.log import get_logger

log = get_logger("products")

_INT_RE = re.compile(r"-?\d+", re.ASCII)

# signed 64-bit, the widest integer key any supported store can hold
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


class CatalogException(Exception):
    status_code = 500
    message = "Failed to process the request"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class InvalidIdentifier(CatalogException):
    status_code = 400
    message = "Invalid identifier provided"


class ValidationFailed(CatalogException):
    status_code = 400
    message = "Provided data does not meet the requirements"

    def __init__(self, details: List[FieldError], message: Optional[str] = None):
        super().__init__(message)
        self.details = details


class NotFound(CatalogException):
    status_code = 404
    message = "Item not found in catalog"


class StoreFailure(CatalogException):
    status_code = 500
    message = "Failed to process the request"


def parse_product_id(raw: Any) -> int:
    """Path ids arrive as strings; anything that is not a plain integer is rejected."""
    if isinstance(raw, bool):
        raise InvalidIdentifier()
    if isinstance(raw, int):
        return raw
    text = str(raw).strip()
    if not _INT_RE.fullmatch(text):
        raise InvalidIdentifier()
    return int(text)


class ProductService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = ProductRepository(db)

    def _now(self) -> datetime:
        # naive UTC; SQLite hands datetimes back without tzinfo
        return datetime.now(timezone.utc).replace(tzinfo=None)

    def _next_update_time(self, previous: Optional[datetime]) -> datetime:
        """updated_at must move forward even when the clock has not."""
        now = self._now()
        if previous is not None and now <= previous:
            now = previous + timedelta(microseconds=1)
        return now

    @contextmanager
    def _store(self, action: str):
        try:
            yield
        except SQLAlchemyError as e:
            log.exception("Store failure while %s", action)
            self.db.rollback()
            raise StoreFailure() from e

    def _require(self, product_id: int) -> Product:
        if not MIN_ROW_ID <= product_id <= MAX_ROW_ID:
            # no row can carry this id
            raise NotFound()
        p = self.repo.get(product_id)
        if p is None:
            raise NotFound()
        return p

    def list_products(self) -> List[Product]:
        with self._store("listing products"):
            return self.repo.list_all()

    def get_product(self, raw_id: Any) -> Product:
        product_id = parse_product_id(raw_id)
        with self._store(f"fetching product {product_id}"):
            return self._require(product_id)

    def create_product(self, payload: Any) -> Product:
        result = validate_product(payload, mode="full")
        if not result.ok:
            raise ValidationFailed(result.errors)

        with self._store("creating product"):
            p = self.repo.add(result.value, self._now())
            self.db.commit()
            self.db.refresh(p)
        log.info("Created product id=%s", p.id)
        return p

    def update_product(self, raw_id: Any, payload: Any) -> Product:
        """
        Partial update: only supplied fields overwrite the stored row and
        updated_at is always refreshed, so an empty payload is a valid touch.
        """
        product_id = parse_product_id(raw_id)
        result = validate_product(payload, mode="partial")
        if not result.ok:
            raise ValidationFailed(result.errors)

        with self._store(f"updating product {product_id}"):
            p = self._require(product_id)
            self.repo.apply(p, result.value, self._next_update_time(p.updated_at))
            self.db.commit()
            self.db.refresh(p)
        log.info("Updated product id=%s fields=%s", p.id, sorted(result.value))
        return p

    def delete_product(self, raw_id: Any) -> None:
        product_id = parse_product_id(raw_id)
        with self._store(f"deleting product {product_id}"):
            p = self._require(product_id)
            self.repo.delete(p)
            self.db.commit()
        log.info("Deleted product id=%s", product_id)
