"""Demo product catalog"""

from typing import Optional
from ..models.product import Product

# Demo catalog, prices in INR
PRODUCTS: dict[str, Product] = {
    "prod-001": Product(
        id="prod-001",
        name="Smartphone",
        category="electronics",
        image="/static/images/smartphone.jpg",
        short_description="Latest smartphone with advanced features",
        long_description="6.5-inch AMOLED display, triple camera system and all-day battery.",
        price=25000,
        sku="SKU-ELECTRONICS-001",
        is_featured=True,
    ),
    "prod-002": Product(
        id="prod-002",
        name="Laptop",
        category="electronics",
        image="/static/images/laptop.jpg",
        short_description="High-performance laptop for work and gaming",
        long_description="14-inch display, 16GB RAM and 512GB SSD in a slim aluminium body.",
        price=55000,
        sku="SKU-ELECTRONICS-002",
    ),
    "prod-003": Product(
        id="prod-003",
        name="Headphones",
        category="electronics",
        image="/static/images/headphones.jpg",
        short_description="Premium wireless headphones with noise cancellation",
        long_description="Over-ear design with 30-hour battery life and fast charging.",
        price=3500,
        sku="SKU-ELECTRONICS-003",
    ),
    "prod-004": Product(
        id="prod-004",
        name="T-Shirt",
        category="fashion",
        image="/static/images/t-shirt.jpg",
        short_description="Comfortable cotton t-shirt in various colors",
        long_description="100% combed cotton, regular fit, machine washable.",
        price=800,
        sku="SKU-FASHION-001",
        is_featured=True,
    ),
    "prod-005": Product(
        id="prod-005",
        name="Jeans",
        category="fashion",
        image="/static/images/jeans.jpg",
        short_description="Premium denim jeans with perfect fit",
        long_description="Stretch denim with a tapered leg and five-pocket styling.",
        price=2500,
        sku="SKU-FASHION-002",
    ),
    "prod-006": Product(
        id="prod-006",
        name="Ceramic Plant Pot",
        category="home-garden",
        image="/static/images/plant-pot.jpg",
        short_description="Glazed ceramic pot for indoor plants",
        long_description="Drainage hole and matching saucer included.",
        price=650,
        sku="SKU-HOME-GARDEN-001",
    ),
    "prod-007": Product(
        id="prod-007",
        name="Yoga Mat",
        category="sports-fitness",
        image="/static/images/yoga-mat.jpg",
        short_description="Non-slip yoga mat with carrying strap",
        long_description="6mm thick TPE mat, lightweight and easy to clean.",
        price=1200,
        sku="SKU-SPORTS-FITNESS-001",
        is_featured=True,
    ),
    "prod-008": Product(
        id="prod-008",
        name="Atomic Habits",
        category="books-media",
        image="/static/images/atomic-habits.jpg",
        short_description="An easy and proven way to build good habits",
        long_description="Paperback edition by James Clear.",
        price=499,
        sku="SKU-BOOKS-MEDIA-001",
    ),
    "prod-009": Product(
        id="prod-009",
        name="Face Serum",
        category="health-beauty",
        image="/static/images/face-serum.jpg",
        short_description="Vitamin C serum for glowing skin",
        long_description="30ml bottle, suitable for all skin types.",
        price=899,
        sku="SKU-HEALTH-BEAUTY-001",
    ),
    "prod-010": Product(
        id="prod-010",
        name="Building Blocks Set",
        category="toys-games",
        image="/static/images/building-blocks.jpg",
        short_description="Creative building blocks for kids",
        long_description="500 pieces in assorted colours with storage box.",
        price=1499,
        sku="SKU-TOYS-GAMES-001",
    ),
}

SORT_KEYS = {
    "name": (lambda p: p.name.lower(), False),
    "price-low": (lambda p: p.price or 0, False),
    "price-high": (lambda p: p.price or 0, True),
}


class ProductDatabase:
    """In-memory product database"""

    def __init__(self, products: Optional[dict[str, Product]] = None):
        source = PRODUCTS if products is None else products
        self.products = {pid: p.model_copy() for pid, p in source.items()}

    def get_product(self, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def search_products(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        sort_by: Optional[str] = "name",
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Product], int]:
        """
        Search products with filters.

        Products without a price are treated as costing 0 for the price
        filters and sorts. An unknown sort_by keeps catalog order.

        Returns:
            Tuple of (matching products, total count)
        """
        results = list(self.products.values())

        # Filter by search query
        if query:
            query_lower = query.lower()
            results = [
                p for p in results
                if query_lower in p.name.lower()
                or query_lower in (p.short_description or "").lower()
            ]

        # Filter by category slug
        if category and category != "all":
            results = [p for p in results if p.category == category]

        # Filter by price range
        if min_price is not None:
            results = [p for p in results if (p.price or 0) >= min_price]
        if max_price is not None:
            results = [p for p in results if (p.price or 0) <= max_price]

        if sort_by in SORT_KEYS:
            key, reverse = SORT_KEYS[sort_by]
            results.sort(key=key, reverse=reverse)

        # Get total before pagination
        total = len(results)

        # Apply pagination
        results = results[offset : offset + limit]

        return results, total

    def get_featured(self, limit: int = 3) -> list[Product]:
        """Featured products in catalog order"""
        return [p for p in self.products.values() if p.is_featured][:limit]

    def get_related(self, product_id: str, limit: int = 4) -> list[Product]:
        """Other products to show next to a product page"""
        return [p for p in self.products.values() if p.id != product_id][:limit]
