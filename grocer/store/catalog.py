from decimal import Decimal
from typing import List, Sequence, Tuple
from ..models.models import Product

SEED_PRODUCTS: Tuple[Tuple[str, str, str], ...] = (
    ("Banana", "0.79", "Fruit"),
    ("Apple", "0.99", "Fruit"),
    ("Orange", "0.69", "Fruit"),
    ("Potato", "1.29", "Vegetable"),
    ("Tomato", "1.49", "Vegetable"),
    ("Lettuce", "1.99", "Vegetable"),
    ("Milk", "2.49", "Dairy"),
    ("Eggs", "1.99", "Dairy"),
    ("Cheese", "3.99", "Dairy"),
    ("Soda", "1.29", "Beverage"),
    ("Water", "0.99", "Beverage"),
    ("Juice", "2.49", "Beverage"),
    ("Chips", "1.99", "Snack"),
    ("Chocolate", "2.99", "Snack"),
    ("Cookies", "1.79", "Snack"),
)


class Catalog:
    def __init__(self, products: Sequence[Product]):
        self._products: Tuple[Product, ...] = tuple(products)

    @classmethod
    def seeded(cls) -> "Catalog":
        return cls([Product(name=name, price=Decimal(price), category=category)
                    for name, price, category in SEED_PRODUCTS])

    def get_products(self) -> List[Product]:
        return list(self._products)

    def is_valid_index(self, index: int) -> bool:
        return 1 <= index <= len(self._products)

    def get(self, index: int) -> Product:
        """Product at 1-based ``index``; check ``is_valid_index`` first."""
        return self._products[index - 1]

    def __len__(self) -> int:
        return len(self._products)
