"""Localized menu text.

Each language has a ``messages_<code>.json`` resource mapping message keys to
text. English is built in, so a missing or broken resource never leaves the
menu without labels.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Mapping
from .constants import Language, DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)


class MessageKey(Enum):
    DISPLAY_PRODUCTS = 'menu.option.displayProducts'
    ADD_PRODUCT = 'menu.option.addProduct'
    REMOVE_PRODUCT = 'menu.option.removeProduct'
    VIEW_CART = 'menu.option.viewCart'
    GET_RECEIPT = 'menu.option.getReceipt'
    EXIT = 'menu.option.exit'
    CHOICE_PROMPT = 'menu.choicePrompt'
    CHOICE_PRODUCT = 'menu.choiceProduct'
    CHOICE_QUANTITY = 'menu.choiceQuantity'
    CHOICE_REMOVE_QUANTITY = 'menu.choiceRemoveQuantity'
    ADDED_TO_CART = 'menu.option.addedToCart'
    REMOVED_FROM_CART = 'menu.option.removedFromCart'
    INVALID_INDEX = 'menu.invalidIndex'
    INVALID_QUANTITY = 'menu.invalidQuantity'
    INVALID_INPUT = 'menu.invalidInput'
    CART_EMPTY = 'menu.cartEmpty'
    INVALID_CHOICE = 'menu.invalidChoice'
    EXITING = 'menu.exiting'
    CART_ITEMS = 'menu.cartItems'
    RECEIPT = 'menu.receipt'
    TOTAL = 'menu.total'
    CATEGORY = 'menu.category'
    QUANTITY = 'menu.quantity'
    CART_SAVED = 'menu.cartSaved'
    CART_SAVE_ERROR = 'menu.cartSaveError'


ENGLISH_MESSAGES: Dict[MessageKey, str] = {
    MessageKey.DISPLAY_PRODUCTS: 'Display available products',
    MessageKey.ADD_PRODUCT: 'Add product to cart',
    MessageKey.REMOVE_PRODUCT: 'Remove product from cart',
    MessageKey.VIEW_CART: 'View cart',
    MessageKey.GET_RECEIPT: 'Get receipt',
    MessageKey.EXIT: 'Exit',
    MessageKey.CHOICE_PROMPT: 'Enter your choice: ',
    MessageKey.CHOICE_PRODUCT: 'Enter the product number: ',
    MessageKey.CHOICE_QUANTITY: 'Enter the quantity: ',
    MessageKey.CHOICE_REMOVE_QUANTITY: 'Enter the quantity to remove: ',
    MessageKey.ADDED_TO_CART: 'added to cart.',
    MessageKey.REMOVED_FROM_CART: 'removed from cart.',
    MessageKey.INVALID_INDEX: 'Invalid product number!',
    MessageKey.INVALID_QUANTITY: 'Quantity must be a positive number!',
    MessageKey.INVALID_INPUT: 'Invalid input! Please enter a number.',
    MessageKey.CART_EMPTY: 'Your cart is empty.',
    MessageKey.INVALID_CHOICE: 'Invalid choice! Please try again.',
    MessageKey.EXITING: 'Thank you for shopping with us. Goodbye!',
    MessageKey.CART_ITEMS: 'Cart Items:',
    MessageKey.RECEIPT: 'Receipt:',
    MessageKey.TOTAL: 'Total',
    MessageKey.CATEGORY: 'Category',
    MessageKey.QUANTITY: 'Quantity',
    MessageKey.CART_SAVED: 'Cart saved to',
    MessageKey.CART_SAVE_ERROR: 'Error saving cart to file:',
}


class Messages:
    """Read-only lookup from ``MessageKey`` to text in one language."""

    def __init__(self, language: Language, texts: Mapping[MessageKey, str]):
        self.language = language
        self._texts = dict(ENGLISH_MESSAGES)
        self._texts.update(texts)

    def __getitem__(self, key: MessageKey) -> str:
        return self._texts[key]


def resource_path(locales_dir: Path, language: Language) -> Path:
    return Path(locales_dir) / f"messages_{language.value}.json"


def _read_resource(path: Path) -> Dict[MessageKey, str]:
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object in {path}")

    texts = {}
    known = {key.value: key for key in MessageKey}
    for raw_key, text in data.items():
        key = known.get(raw_key)
        if key is None:
            logger.debug(f"Ignoring unknown message key {raw_key} in {path}")
            continue
        if not isinstance(text, str):
            raise ValueError(f"message {raw_key} in {path} is not a string")
        texts[key] = text
    return texts


def load_messages(language: Language, locales_dir: Path) -> Messages:
    """Load messages for ``language``, falling back to English on any failure."""
    path = resource_path(locales_dir, language)
    try:
        texts = _read_resource(path)
    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.warning(f"Could not load messages for {language.value} from {path}: {e}")
        return Messages(DEFAULT_LANGUAGE, {})

    missing = [key.value for key in MessageKey if key not in texts]
    if missing:
        logger.warning(f"Messages for {language.value} missing keys, using English: {', '.join(missing)}")
    return Messages(language, texts)
