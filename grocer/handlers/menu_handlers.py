import logging
from typing import Callable, Dict, Optional
from ..models.session import ShopSession
from ..store.receipts import save_cart_to_file
from ..utils.constants import (
    RUNNING, EXITING, DISPLAY_PRODUCTS, ADD_PRODUCT, REMOVE_PRODUCT, VIEW_CART, GET_RECEIPT, EXIT
)
from ..utils.formatters import format_cart_line, format_removal_line, format_receipt_text
from ..utils.menus import create_main_menu, create_product_menu
from ..utils.messages import MessageKey

logger = logging.getLogger(__name__)


def read_integer(session: ShopSession, prompt_key: MessageKey) -> int:
    return session.console.read_valid_integer(
        session.messages[prompt_key],
        session.messages[MessageKey.INVALID_INPUT]
    )


def read_quantity(session: ShopSession, prompt_key: MessageKey) -> Optional[int]:
    quantity = read_integer(session, prompt_key)
    if quantity <= 0:
        session.console.say(session.messages[MessageKey.INVALID_QUANTITY])
        return None
    return quantity


def handle_display_products(session: ShopSession) -> int:
    for line in create_product_menu(session.catalog.get_products(), session.messages):
        session.console.say(line)
    return RUNNING


def handle_add_product(session: ShopSession) -> int:
    handle_display_products(session)

    index = read_integer(session, MessageKey.CHOICE_PRODUCT)
    if not session.catalog.is_valid_index(index):
        session.console.say(session.messages[MessageKey.INVALID_INDEX])
        return RUNNING

    product = session.catalog.get(index)
    quantity = read_quantity(session, MessageKey.CHOICE_QUANTITY)
    if quantity is None:
        return RUNNING

    session.cart.add_to_cart(product, quantity)
    logger.debug(f"Added {quantity} x {product.name}")
    session.console.say(f"{product.name} {session.messages[MessageKey.ADDED_TO_CART]}")
    return RUNNING


def handle_remove_product(session: ShopSession) -> int:
    if session.cart.is_empty():
        session.console.say(session.messages[MessageKey.CART_EMPTY])
        return RUNNING

    # Indices are only valid against this listing
    lines = session.cart.line_items()
    session.console.say(session.messages[MessageKey.CART_ITEMS])
    for index, line in enumerate(lines, start=1):
        session.console.say(format_removal_line(index, line, session.messages))

    index = read_integer(session, MessageKey.CHOICE_PRODUCT)
    if not 1 <= index <= len(lines):
        session.console.say(session.messages[MessageKey.INVALID_INDEX])
        return RUNNING

    product = lines[index - 1].product
    quantity = read_quantity(session, MessageKey.CHOICE_REMOVE_QUANTITY)
    if quantity is None:
        return RUNNING

    session.cart.remove_from_cart(product, quantity)
    logger.debug(f"Removed {quantity} x {product.name}")
    session.console.say(f"{product.name} {session.messages[MessageKey.REMOVED_FROM_CART]}")
    return RUNNING


def handle_view_cart(session: ShopSession) -> int:
    if session.cart.is_empty():
        session.console.say(session.messages[MessageKey.CART_EMPTY])
        return RUNNING

    session.console.say(session.messages[MessageKey.CART_ITEMS])
    for line in session.cart.line_items():
        session.console.say(format_cart_line(line))
    return RUNNING


def handle_get_receipt(session: ShopSession) -> int:
    receipt_text, _ = format_receipt_text(session.cart, session.messages)
    session.console.say(receipt_text)
    return RUNNING


def handle_exit(session: ShopSession) -> int:
    session.console.say(session.messages[MessageKey.EXITING])

    path, error = save_cart_to_file(session.cart, session.purchases_dir)
    if path is not None:
        session.console.say(f"{session.messages[MessageKey.CART_SAVED]} {path}")
    else:
        session.console.error(f"{session.messages[MessageKey.CART_SAVE_ERROR]} {error}")
    return EXITING


MENU_HANDLERS: Dict[int, Callable[[ShopSession], int]] = {
    DISPLAY_PRODUCTS: handle_display_products,
    ADD_PRODUCT: handle_add_product,
    REMOVE_PRODUCT: handle_remove_product,
    VIEW_CART: handle_view_cart,
    GET_RECEIPT: handle_get_receipt,
    EXIT: handle_exit,
}


def handle_menu_choice(session: ShopSession, choice: int) -> int:
    handler = MENU_HANDLERS.get(choice)
    if handler is None:
        session.console.say(session.messages[MessageKey.INVALID_CHOICE])
        return RUNNING
    return handler(session)


def run_menu(session: ShopSession) -> None:
    """Show the main menu and dispatch choices until the user exits."""
    state = RUNNING
    while state == RUNNING:
        for line in create_main_menu(session.messages):
            session.console.say(line)
        choice = read_integer(session, MessageKey.CHOICE_PROMPT)
        state = handle_menu_choice(session, choice)
