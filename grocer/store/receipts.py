import logging
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple
from ..models.models import Cart
from ..utils.formatters import format_cart_line, format_total

logger = logging.getLogger(__name__)


def receipt_lines(cart: Cart, created_at: datetime) -> List[str]:
    lines = [f"Purchase Date: {created_at.ctime()}", "Items:"]
    lines.extend(format_cart_line(line) for line in cart.line_items())
    lines.append(format_total(cart.total()))
    return lines


def save_cart_to_file(cart: Cart, folder_path: Path,
                      created_at: Optional[datetime] = None) -> Tuple[Optional[Path], Optional[str]]:
    """
    Write the cart to ``<folder_path>/purchase_<epoch-millis>.txt``.

    The folder is created if missing. Failures are logged, never raised.

    Returns:
        (path, None) on success, (None, error text) on failure
    """
    created_at = created_at or datetime.now()
    folder = Path(folder_path)
    file_path = folder / f"purchase_{int(time.time() * 1000)}.txt"

    try:
        folder.mkdir(parents=True, exist_ok=True)
        with open(file_path, 'w', encoding='utf-8') as f:
            for line in receipt_lines(cart, created_at):
                f.write(line + "\n")
    except OSError as e:
        logger.error(f"Error saving cart to {file_path}: {e}")
        return None, str(e)

    logger.info(f"Cart saved to {file_path}")
    return file_path, None
