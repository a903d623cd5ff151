from decimal import Decimal
from typing import List, Tuple
from ..models.models import Cart, CartLine, Product
from .messages import Messages, MessageKey


def format_money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def format_product_line(index: int, product: Product, messages: Messages) -> str:
    return (f"{index}. {product.name} - {format_money(product.price)} - "
            f"{messages[MessageKey.CATEGORY]}: {product.category}")


def format_cart_line(line: CartLine) -> str:
    """Format one line as ``name - $price x quantity = $subtotal``."""
    return (f"{line.product.name} - {format_money(line.product.price)} x "
            f"{line.quantity} = {format_money(line.subtotal)}")


def format_removal_line(index: int, line: CartLine, messages: Messages) -> str:
    return f"{index}. {line.product.name} - {messages[MessageKey.QUANTITY]}: {line.quantity}"


def format_total(total: Decimal, label: str = 'Total') -> str:
    return f"{label}: {format_money(total)}"


def format_receipt_text(cart: Cart, messages: Messages) -> Tuple[str, Decimal]:
    """Format the on-screen receipt and return it with the cart total."""
    total = cart.total()
    lines: List[str] = [messages[MessageKey.RECEIPT]]
    lines.extend(format_cart_line(line) for line in cart.line_items())
    lines.append(format_total(total, messages[MessageKey.TOTAL]))
    return "\n".join(lines), total
