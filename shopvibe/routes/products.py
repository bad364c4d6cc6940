"""Product and category API routes"""

from typing import Optional
from fastapi import APIRouter, HTTPException, Query, Depends

from ..models.product import Category, Product, ProductSearchResponse
from ..database import CategoryDatabase, ProductDatabase
from ..core.dependencies import get_category_db, get_product_db

router = APIRouter(prefix="/api/products", tags=["Products"])
categories_router = APIRouter(prefix="/api/categories", tags=["Products"])


@router.get("", response_model=ProductSearchResponse)
async def search_products(
    query: Optional[str] = Query(None, description="Search in name and short description"),
    category: Optional[str] = Query(None, description="Category slug, or 'all'"),
    min_price: Optional[float] = Query(None, ge=0, description="Minimum price"),
    max_price: Optional[float] = Query(None, ge=0, description="Maximum price"),
    sort_by: str = Query("name", description="name, price-low or price-high"),
    limit: int = Query(20, ge=1, le=100, description="Max results"),
    offset: int = Query(0, ge=0, description="Offset for pagination"),
    product_db: ProductDatabase = Depends(get_product_db),
):
    """Search and sort the catalog"""
    products, total = product_db.search_products(
        query=query,
        category=category,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        limit=limit,
        offset=offset,
    )

    return ProductSearchResponse(
        products=products,
        total=total,
        limit=limit,
        offset=offset,
    )


@router.get("/featured", response_model=list[Product])
async def featured_products(
    limit: int = Query(3, ge=1, le=20),
    product_db: ProductDatabase = Depends(get_product_db),
):
    """Featured products for the home page"""
    return product_db.get_featured(limit=limit)


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    product_db: ProductDatabase = Depends(get_product_db),
):
    """Get a product by ID"""
    product = product_db.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/{product_id}/related", response_model=list[Product])
async def related_products(
    product_id: str,
    limit: int = Query(4, ge=1, le=20),
    product_db: ProductDatabase = Depends(get_product_db),
):
    """Other products to show on a product page"""
    if not product_db.get_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return product_db.get_related(product_id, limit=limit)


@categories_router.get("", response_model=list[Category])
async def list_categories(category_db: CategoryDatabase = Depends(get_category_db)):
    """List active categories in display order"""
    return category_db.list_active()
