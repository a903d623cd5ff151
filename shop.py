import logging
import sys
from dotenv import load_dotenv
from grocer.handlers.language_handlers import choose_messages
from grocer.handlers.menu_handlers import run_menu
from grocer.models.session import ShopSession
from grocer.store.catalog import Catalog
from grocer.utils.config import Settings
from grocer.utils.console import Console

logger = logging.getLogger(__name__)


def main():
    # Load environment variables
    load_dotenv()
    settings = Settings.from_env()

    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s', level=settings.log_level)

    catalog = Catalog.seeded()
    console = Console()

    try:
        messages = choose_messages(console, settings.locales_dir)
        session = ShopSession(
            catalog=catalog,
            messages=messages,
            console=console,
            purchases_dir=settings.purchases_dir
        )
        logger.info(f"Starting session in {messages.language.value} with {len(catalog)} products")
        run_menu(session)
    except (KeyboardInterrupt, EOFError):
        print("\nShutting down...", file=sys.stderr)
        sys.exit(130)

    sys.exit(0)


if __name__ == '__main__':
    main()
