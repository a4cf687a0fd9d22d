"""Catalog endpoints: CRUD over products plus brand and type listings."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.models.products import (
    DEFAULT_PAGE_SIZE,
    INT32_MAX,
    Product,
    ProductPayload,
    ProductSpecParams,
)
from src.infrastructure.database import get_session
from src.infrastructure.persistence.models.catalog import Product as OrmProduct
from src.infrastructure.persistence.repositories import SqlRepository, get_repositories
from src.infrastructure.persistence.specifications import (
    brand_spec,
    product_count_spec,
    product_spec,
    type_spec,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/products", tags=["products"])

TOTAL_COUNT_HEADER = "X-Total-Count"


def get_product_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> SqlRepository[OrmProduct]:
    return get_repositories(session).products


RepositoryDependency = Annotated[SqlRepository[OrmProduct], Depends(get_product_repository)]


def _to_orm(payload: ProductPayload, product_id: int | None = None) -> OrmProduct:
    return OrmProduct(
        id=product_id,
        name=payload.name,
        description=payload.description,
        price=payload.price,
        picture_url=payload.picture_url,
        type=payload.type,
        brand=payload.brand,
        quantity_in_stock=payload.quantity_in_stock,
    )


@router.get("", response_model=list[Product], summary="List products")
async def list_products(
    repository: RepositoryDependency,
    response: Response,
    brands: str | None = None,
    types: str | None = None,
    sort: str | None = None,
    page_index: Annotated[int, Query(alias="pageIndex", ge=1, le=INT32_MAX)] = 1,
    page_size: Annotated[int, Query(alias="pageSize", ge=1)] = DEFAULT_PAGE_SIZE,
    search: str | None = None,
) -> list[Product]:
    """Return one page of products filtered by brand, type and name search."""
    params = ProductSpecParams(
        brands=brands,
        types=types,
        sort=sort,
        page_index=page_index,
        page_size=page_size,
        search=search,
    )
    rows = await repository.list_with_spec(product_spec(params))
    total = await repository.count_with_spec(product_count_spec(params))
    response.headers[TOTAL_COUNT_HEADER] = str(total)
    return [Product.model_validate(row) for row in rows]


@router.get("/brands", response_model=list[str], summary="List distinct brands")
async def list_brands(repository: RepositoryDependency) -> list[str]:
    return await repository.list_with_spec(brand_spec())


@router.get("/types", response_model=list[str], summary="List distinct product types")
async def list_types(repository: RepositoryDependency) -> list[str]:
    return await repository.list_with_spec(type_spec())


@router.get("/{product_id}", response_model=Product, summary="Get a product by id")
async def get_product(product_id: int, repository: RepositoryDependency) -> Product:
    row = await repository.get_by_id(product_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
    return Product.model_validate(row)


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
async def create_product(
    payload: ProductPayload,
    request: Request,
    response: Response,
    repository: RepositoryDependency,
) -> Product:
    """Insert a product; the store assigns its id and any body id is ignored."""
    if not payload.is_valid():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Product is not valid")

    row = _to_orm(payload)
    repository.add(row)

    if not await repository.save_changes():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Product was not saved",
        )

    logger.info("Created product %s (%s)", row.id, row.name)
    response.headers["Location"] = str(request.url_for("get_product", product_id=row.id))
    return Product.model_validate(row)


@router.put(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a product",
)
async def update_product(
    product_id: int,
    payload: ProductPayload,
    repository: RepositoryDependency,
) -> Response:
    """Full replace of an existing product.

    A path/body id mismatch is rejected before the store is consulted, so it
    yields 400 whether or not the product exists.
    """
    if not payload.is_valid():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Product is not valid")
    if payload.id != product_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Id does not match the product",
        )
    if not await repository.exists(product_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product does not exist")

    await repository.update(_to_orm(payload, product_id))

    if not await repository.save_changes():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Product was not saved",
        )

    logger.info("Updated product %s", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a product",
)
async def delete_product(product_id: int, repository: RepositoryDependency) -> Response:
    row = await repository.get_by_id(product_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")

    await repository.remove(row)

    if not await repository.save_changes():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Product was not deleted",
        )

    logger.info("Deleted product %s", product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
