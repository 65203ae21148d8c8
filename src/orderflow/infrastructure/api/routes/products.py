"""Catalog endpoints (plain lookups and edits, no cross-entity rules)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from orderflow.application.dto import UserDTO
from orderflow.infrastructure.api.dependencies import current_user, get_container
from orderflow.infrastructure.api.schemas import CreateProductRequest, UpdateProductRequest
from orderflow.infrastructure.bootstrap import Container

router = APIRouter(prefix="/products", tags=["products"])


@router.get("")
def list_products(
    search: str | None = Query(default=None),
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    in_stock: str | None = Query(default=None, alias="inStock"),
    container: Container = Depends(get_container),
) -> dict:
    products = container.list_products().handle(
        search=search,
        min_price=min_price,
        max_price=max_price,
        in_stock=in_stock == "true",
    )
    return {"products": [p.to_dict() for p in products], "count": len(products)}


@router.get("/{product_id}")
def get_product(product_id: int, container: Container = Depends(get_container)) -> dict:
    return {"product": container.show_product().handle(product_id).to_dict()}


@router.post("")
def create_product(
    body: CreateProductRequest,
    _: UserDTO = Depends(current_user),
    container: Container = Depends(get_container),
) -> JSONResponse:
    product = container.add_product().handle(body.name, body.price, body.stock)
    return JSONResponse(
        status_code=201,
        content={"message": "Product created successfully", "product": product.to_dict()},
    )


@router.put("/{product_id}")
def update_product(
    product_id: int,
    body: UpdateProductRequest,
    _: UserDTO = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    product = container.update_product().handle(
        product_id, name=body.name, price=body.price, stock=body.stock
    )
    return {"message": "Product updated successfully", "product": product.to_dict()}


@router.delete("/{product_id}")
def delete_product(
    product_id: int,
    _: UserDTO = Depends(current_user),
    container: Container = Depends(get_container),
) -> dict:
    container.delete_product().handle(product_id)
    return {"message": "Product deleted successfully"}
