from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ValidationError

from catalog.schemas.product_schema import FieldError, ProductCreate, ProductUpdate

Mode = Literal["full", "partial"]

_SCHEMAS = {
    "full": ProductCreate,
    "partial": ProductUpdate,
}

# one reason per field, keyed by the JSON (camelCase) field name
FIELD_REASONS = {
    "name": "name must be at least 2 characters",
    "description": "description must be at least 3 characters",
    "price": "price must be a positive number",
    "imageUrl": "imageUrl must be a valid URL",
    "image_url": "image_url must be a valid URL",
    "category": "category must be at least 2 characters",
    "stock": "stock must be an integer between 0 and 2147483647",
    "status": "status must be available or unavailable",
}


class ValidationResult(BaseModel):
    value: Optional[Dict[str, Any]] = None
    errors: List[FieldError] = []

    @property
    def ok(self) -> bool:
        return not self.errors


def _field_errors(exc: ValidationError) -> List[FieldError]:
    errors: List[FieldError] = []
    seen = set()
    for err in exc.errors():
        loc = err.get("loc") or ()
        field = ".".join(str(part) for part in loc) or "body"
        # a field can fail several rules (e.g. reject_null and type); report once
        if field in seen:
            continue
        seen.add(field)

        if field == "body":
            reason = "request body must be a JSON object"
        elif err.get("type") == "missing":
            reason = f"{field} is required"
        else:
            reason = FIELD_REASONS.get(field, err.get("msg", "invalid value"))
        errors.append(FieldError(field=field, reason=reason))
    return errors


def validate_product(payload: Any, mode: Mode = "full") -> ValidationResult:
    """
    Validate a candidate product record.

    mode="full" checks a complete record for create and fills defaults;
    mode="partial" checks only the supplied fields for update. Malformed input
    never raises: the result carries either the normalized record (keyed by
    column name) or one error per offending field.
    """
    try:
        schema = _SCHEMAS[mode]
    except KeyError:
        raise ValueError(f"unknown validation mode: {mode!r}") from None

    if not isinstance(payload, dict):
        return ValidationResult(
            errors=[FieldError(field="body", reason="request body must be a JSON object")]
        )

    try:
        record = schema.model_validate(payload)
    except ValidationError as exc:
        return ValidationResult(errors=_field_errors(exc))

    value = record.model_dump(exclude_unset=(mode == "partial"))
    return ValidationResult(value=value)
