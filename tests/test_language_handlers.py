import logging

from grocer.handlers.language_handlers import choose_messages, select_language
from grocer.utils.config import BUNDLED_LOCALES_DIR
from grocer.utils.constants import Language
from grocer.utils.messages import MessageKey


def test_language_menu_is_shown(console, english):
    console.feed(1)
    select_language(console, english)
    assert console.output == ["Select language:", "1. English", "2. Spanish", "3. Latvian"]
    assert console.prompts == ["Enter your choice: "]


def test_choice_two_gives_spanish_menu(console):
    console.feed(2)
    messages = choose_messages(console, BUNDLED_LOCALES_DIR)
    assert messages.language is Language.SPANISH
    assert messages[MessageKey.DISPLAY_PRODUCTS] == "Mostrar productos disponibles"


def test_choice_three_gives_latvian(console, english):
    console.feed(3)
    assert select_language(console, english) is Language.LATVIAN


def test_unknown_choice_defaults_to_english_with_warning(console, caplog):
    console.feed(4)
    with caplog.at_level(logging.WARNING):
        messages = choose_messages(console, BUNDLED_LOCALES_DIR)
    assert messages.language is Language.ENGLISH
    assert messages[MessageKey.EXIT] == "Exit"
    assert console.output[-1] == "Invalid choice! Defaulting to English."
    assert "Unknown language choice 4" in caplog.text


def test_non_numeric_language_choice_is_retried(console, english):
    console.feed("es", 2)
    assert select_language(console, english) is Language.SPANISH
    assert "Invalid input! Please enter a number." in console.output


def test_missing_locale_resource_falls_back(console, tmp_path, caplog):
    console.feed(3)
    with caplog.at_level(logging.WARNING):
        messages = choose_messages(console, tmp_path)
    assert messages.language is Language.ENGLISH
    assert messages[MessageKey.EXIT] == "Exit"
