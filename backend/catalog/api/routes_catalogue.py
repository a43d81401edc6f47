from typing import Any

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.orm import Session

from catalog.db import get_db
from catalog.schemas.product_schema import ProductCreatedOut, ProductOut
from catalog.services.product_service import ProductService

router = APIRouter(tags=["catalogue"])


def _to_dict(p):
    return ProductOut.model_validate(p).model_dump(by_alias=True, mode="json")


@router.get("", summary="List products")
def list_products(db: Session = Depends(get_db)):
    svc = ProductService(db)
    return [_to_dict(p) for p in svc.list_products()]


@router.get("/{product_id}", summary="Get product by id")
def get_product(product_id: str, db: Session = Depends(get_db)):
    svc = ProductService(db)
    return _to_dict(svc.get_product(product_id))


@router.post("", status_code=201, summary="Create product")
def create_product(payload: Any = Body(None), db: Session = Depends(get_db)):
    """
    payload: { "name": "Pen", "description": "Blue pen", "price": 1.5,
               "category": "Office", "stock": 10 }
    returns { "id": <new id> }
    """
    svc = ProductService(db)
    p = svc.create_product(payload)
    return ProductCreatedOut(id=p.id).model_dump()


@router.put("/{product_id}", summary="Partially update product")
def update_product(
    product_id: str, payload: Any = Body(None), db: Session = Depends(get_db)
):
    svc = ProductService(db)
    return _to_dict(svc.update_product(product_id, payload))


@router.delete("/{product_id}", status_code=204, summary="Delete product")
def delete_product(product_id: str, db: Session = Depends(get_db)):
    svc = ProductService(db)
    svc.delete_product(product_id)
    return Response(status_code=204)
