from dataclasses import dataclass, field
from pathlib import Path
from .models import Cart
from ..store.catalog import Catalog
from ..utils.console import Console
from ..utils.messages import Messages


@dataclass
class ShopSession:
    """Everything one shopping run works on, passed to every handler."""
    catalog: Catalog
    messages: Messages
    console: Console
    purchases_dir: Path
    cart: Cart = field(default_factory=Cart)
