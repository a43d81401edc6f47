import pytest

from catalog.models.product import ProductStatus
from catalog.services.product_validator import validate_product

VALID = {
    "name": "Pen",
    "description": "Blue pen",
    "price": 1.5,
    "category": "Office",
    "stock": 10,
}


def _fields(result):
    return {e.field for e in result.errors}


def test_full_record_is_normalized_with_defaults():
    payload = {k: v for k, v in VALID.items() if k != "stock"}
    result = validate_product(payload, mode="full")
    assert result.ok
    assert result.value == {
        "name": "Pen",
        "description": "Blue pen",
        "price": 1.5,
        "image_url": None,
        "category": "Office",
        "stock": 0,
        "status": ProductStatus.available,
    }


def test_numeric_strings_are_coerced():
    result = validate_product(dict(VALID, price="3.25", stock="7"))
    assert result.ok
    assert result.value["price"] == 3.25
    assert result.value["stock"] == 7


@pytest.mark.parametrize("price", [0, -0.01, "-2", "abc", True, float("inf"), None])
def test_bad_prices_are_rejected(price):
    result = validate_product(dict(VALID, price=price))
    assert _fields(result) == {"price"}
    assert result.value is None


@pytest.mark.parametrize("stock", [-1, "-5", 2.5, "ten", False, 2**31, 10**20])
def test_bad_stock_is_rejected(stock):
    result = validate_product(dict(VALID, stock=stock))
    assert _fields(result) == {"stock"}


def test_string_minimum_lengths():
    result = validate_product(dict(VALID, name="P", description="ab", category="O"))
    assert _fields(result) == {"name", "description", "category"}
    reasons = {e.field: e.reason for e in result.errors}
    assert "2" in reasons["name"]
    assert "3" in reasons["description"]


def test_image_url_accepts_url_as_given():
    url = "https://cdn.example.com/p/pen.png"
    result = validate_product(dict(VALID, imageUrl=url))
    assert result.ok
    assert result.value["image_url"] == url


def test_image_url_must_be_a_url():
    result = validate_product(dict(VALID, imageUrl="pen.png"))
    assert _fields(result) == {"imageUrl"}


def test_missing_required_fields_are_reported():
    result = validate_product({"name": "Pen"})
    assert _fields(result) == {"description", "price", "category"}
    reasons = {e.field: e.reason for e in result.errors}
    assert reasons["price"] == "price is required"


def test_unknown_keys_are_dropped():
    result = validate_product(dict(VALID, id=5, createdAt="x", colour="blue"))
    assert result.ok
    assert "id" not in result.value
    assert "colour" not in result.value


@pytest.mark.parametrize("payload", [None, [], "Pen", 42])
def test_non_object_payload_never_raises(payload):
    result = validate_product(payload, mode="partial")
    assert not result.ok
    assert [e.field for e in result.errors] == ["body"]


def test_partial_returns_only_supplied_fields():
    result = validate_product({"stock": "0"}, mode="partial")
    assert result.ok
    assert result.value == {"stock": 0}


def test_partial_empty_record_is_valid():
    result = validate_product({}, mode="partial")
    assert result.ok
    assert result.value == {}


def test_partial_applies_the_same_rules():
    result = validate_product({"price": 0, "stock": -1, "name": "x"}, mode="partial")
    assert _fields(result) == {"price", "stock", "name"}


def test_partial_rejects_null_except_image_url():
    result = validate_product({"name": None, "imageUrl": None}, mode="partial")
    assert _fields(result) == {"name"}

    result = validate_product({"imageUrl": None}, mode="partial")
    assert result.ok
    assert result.value == {"image_url": None}


def test_unknown_mode_is_a_programming_error():
    with pytest.raises(ValueError):
        validate_product(VALID, mode="sometimes")


def test_stock_upper_bound_is_inclusive():
    result = validate_product(dict(VALID, stock=2**31 - 1))
    assert result.ok
    result = validate_product({"stock": 2**31}, mode="partial")
    assert result.errors[0].reason == "stock must be an integer between 0 and 2147483647"
