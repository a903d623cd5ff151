from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List


@dataclass(frozen=True)
class Product:
    name: str
    price: Decimal
    category: str


@dataclass(frozen=True)
class CartLine:
    product: Product
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


class Cart:
    """Running quantity per product.

    Entries keep insertion order, so a product removed and added again is
    listed last. A stored quantity is always positive.
    """

    def __init__(self):
        self._items: Dict[Product, int] = {}

    def add_to_cart(self, product: Product, quantity: int) -> None:
        new_quantity = self._items.get(product, 0) + quantity
        if new_quantity > 0:
            self._items[product] = new_quantity
        else:
            self._items.pop(product, None)

    def remove_from_cart(self, product: Product, quantity: int) -> None:
        current_quantity = self._items.get(product, 0)
        if quantity >= current_quantity:
            self._items.pop(product, None)
        else:
            self._items[product] = current_quantity - quantity

    def quantity_of(self, product: Product) -> int:
        return self._items.get(product, 0)

    def line_items(self) -> List[CartLine]:
        return [CartLine(product=product, quantity=quantity) for product, quantity in self._items.items()]

    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.line_items()), Decimal("0"))

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)
