# backend/catalog/schemas/product_schema.py
import math
from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import (
    AfterValidator,
    AliasGenerator,
    AnyUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from catalog.models.product import ProductStatus

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # validate only; the stored value keeps the client's spelling
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("not a valid URL") from None
    return value


def _reject_non_finite(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError("must be finite")
    return value


Name = Annotated[str, Field(min_length=2)]
Description = Annotated[str, Field(min_length=3)]
Price = Annotated[float, Field(gt=0), AfterValidator(_reject_non_finite)]
ImageUrl = Annotated[str, AfterValidator(_check_url)]
Category = Annotated[str, Field(min_length=2)]
# stock column is a 32-bit INT
STOCK_MAX = 2**31 - 1

Stock = Annotated[int, Field(ge=0, le=STOCK_MAX)]


class _ProductInput(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("price", "stock", mode="before", check_fields=False)
    @classmethod
    def reject_bool(cls, value):
        if isinstance(value, bool):
            raise ValueError("booleans are not numbers")
        return value


class ProductCreate(_ProductInput):
    """Full record accepted on create. Defaults apply to omitted stock/status."""

    name: Name
    description: Description
    price: Price
    image_url: Optional[ImageUrl] = None
    category: Category
    stock: Stock = 0
    status: ProductStatus = ProductStatus.available


class ProductUpdate(_ProductInput):
    """
    Partial record accepted on update. Omitted fields stay unset; an explicit
    null is only allowed for image_url.
    """

    name: Optional[Name] = None
    description: Optional[Description] = None
    price: Optional[Price] = None
    image_url: Optional[ImageUrl] = None
    category: Optional[Category] = None
    stock: Optional[Stock] = None
    status: Optional[ProductStatus] = None

    @field_validator(
        "name", "description", "price", "category", "stock", "status", mode="before"
    )
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("may not be null")
        return value


class ProductOut(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: int
    name: str
    description: str
    price: float
    image_url: Optional[str] = None
    category: str
    stock: int
    status: ProductStatus
    created_at: datetime
    updated_at: datetime


class ProductCreatedOut(BaseModel):
    id: int


class FieldError(BaseModel):
    field: str
    reason: str


class ErrorBody(BaseModel):
    message: str
    details: Optional[List[FieldError]] = None
