import logging
import re
from datetime import datetime

from grocer.models.models import Cart
from grocer.store.receipts import save_cart_to_file

CREATED_AT = datetime(2026, 10, 18, 9, 30, 5)


def test_empty_cart_still_writes_receipt(tmp_path):
    folder = tmp_path / "nested" / "purchases"

    path, error = save_cart_to_file(Cart(), folder, created_at=CREATED_AT)

    assert error is None
    assert path.parent == folder
    assert re.fullmatch(r"purchase_\d{13}\.txt", path.name)
    assert path.read_text(encoding="utf-8").splitlines() == [
        "Purchase Date: Sun Oct 18 09:30:05 2026",
        "Items:",
        "Total: $0.00",
    ]


def test_receipt_lists_every_line_and_total(tmp_path, banana, apple):
    cart = Cart()
    cart.add_to_cart(banana, 3)
    cart.add_to_cart(apple, 2)

    path, _ = save_cart_to_file(cart, tmp_path, created_at=CREATED_AT)

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[1:] == [
        "Items:",
        "Banana - $0.79 x 3 = $2.37",
        "Apple - $0.99 x 2 = $1.98",
        "Total: $4.35",
    ]


def test_unwritable_folder_is_reported_not_raised(tmp_path, caplog):
    blocker = tmp_path / "purchases"
    blocker.write_text("not a directory")

    with caplog.at_level(logging.ERROR):
        path, error = save_cart_to_file(Cart(), blocker)

    assert path is None
    assert error
    assert "Error saving cart" in caplog.text
