"""Demo category catalog"""

from typing import Optional
from ..models.product import Category

IMAGE_BASE = "/static/images/categories"

CATEGORIES: dict[str, Category] = {
    c.id: c
    for c in [
        Category(id="cat-electronics", name="Electronics", slug="electronics",
                 description="Latest gadgets and electronic devices",
                 image=f"{IMAGE_BASE}/electronics.png", display_order=1),
        Category(id="cat-fashion", name="Fashion", slug="fashion",
                 description="Trendy clothing and accessories",
                 image=f"{IMAGE_BASE}/fashion.png", display_order=2),
        Category(id="cat-home-garden", name="Home & Garden", slug="home-garden",
                 description="Everything for your home and garden",
                 image=f"{IMAGE_BASE}/home-garden.png", display_order=3),
        Category(id="cat-sports-fitness", name="Sports & Fitness", slug="sports-fitness",
                 description="Sports equipment and fitness gear",
                 image=f"{IMAGE_BASE}/sports-fitness.png", display_order=4),
        Category(id="cat-books-media", name="Books & Media", slug="books-media",
                 description="Books, movies, and digital media",
                 image=f"{IMAGE_BASE}/books-media.png", display_order=5),
        Category(id="cat-health-beauty", name="Health & Beauty", slug="health-beauty",
                 description="Health and beauty products",
                 image=f"{IMAGE_BASE}/health-beauty.png", display_order=6),
        Category(id="cat-automotive", name="Automotive", slug="automotive",
                 description="Car accessories and automotive parts",
                 image=f"{IMAGE_BASE}/automotive.png", display_order=7,
                 is_active=False),
        Category(id="cat-toys-games", name="Toys & Games", slug="toys-games",
                 description="Fun toys and games for all ages",
                 image=f"{IMAGE_BASE}/toys-games.png", display_order=8),
    ]
}


class CategoryDatabase:
    """In-memory category storage"""

    def __init__(self, categories: Optional[dict[str, Category]] = None):
        source = CATEGORIES if categories is None else categories
        self.categories = {cid: c.model_copy() for cid, c in source.items()}

    def get_by_slug(self, slug: str) -> Optional[Category]:
        return next((c for c in self.categories.values() if c.slug == slug), None)

    def list_active(self) -> list[Category]:
        """Active categories in display order"""
        active = [c for c in self.categories.values() if c.is_active]
        return sorted(active, key=lambda c: c.display_order)
