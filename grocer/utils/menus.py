from typing import List
from ..models.models import Product
from .constants import (
    SEPARATOR, DISPLAY_PRODUCTS, ADD_PRODUCT, REMOVE_PRODUCT, VIEW_CART, GET_RECEIPT, EXIT,
    LANGUAGE_CHOICES, LANGUAGE_NAMES, LANGUAGE_PROMPT
)
from .formatters import format_product_line
from .messages import Messages, MessageKey

MAIN_MENU_OPTIONS = (
    (DISPLAY_PRODUCTS, MessageKey.DISPLAY_PRODUCTS),
    (ADD_PRODUCT, MessageKey.ADD_PRODUCT),
    (REMOVE_PRODUCT, MessageKey.REMOVE_PRODUCT),
    (VIEW_CART, MessageKey.VIEW_CART),
    (GET_RECEIPT, MessageKey.GET_RECEIPT),
    (EXIT, MessageKey.EXIT),
)


def create_main_menu(messages: Messages) -> List[str]:
    """Lines of the six-option main menu, framed by separators."""
    lines = ['', SEPARATOR]
    lines.extend(f"{number}. {messages[key]}" for number, key in MAIN_MENU_OPTIONS)
    lines.append(SEPARATOR)
    return lines


def create_product_menu(products: List[Product], messages: Messages) -> List[str]:
    lines = [messages[MessageKey.DISPLAY_PRODUCTS]]
    lines.extend(format_product_line(index, product, messages)
                 for index, product in enumerate(products, start=1))
    return lines


def create_language_menu() -> List[str]:
    lines = [LANGUAGE_PROMPT]
    lines.extend(f"{number}. {LANGUAGE_NAMES[language]}" for number, language in LANGUAGE_CHOICES.items())
    return lines
