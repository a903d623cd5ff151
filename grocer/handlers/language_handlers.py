import logging
from pathlib import Path
from ..utils.console import Console
from ..utils.constants import Language, DEFAULT_LANGUAGE, LANGUAGE_CHOICES, LANGUAGE_CHOICE_PROMPT, LANGUAGE_FALLBACK_NOTICE
from ..utils.menus import create_language_menu
from ..utils.messages import Messages, MessageKey, load_messages

logger = logging.getLogger(__name__)


def select_language(console: Console, messages: Messages) -> Language:
    """Ask for a language by number; anything unknown means English."""
    for line in create_language_menu():
        console.say(line)

    choice = console.read_valid_integer(LANGUAGE_CHOICE_PROMPT, messages[MessageKey.INVALID_INPUT])
    language = LANGUAGE_CHOICES.get(choice)
    if language is None:
        logger.warning(f"Unknown language choice {choice}, using {DEFAULT_LANGUAGE.value}")
        console.say(LANGUAGE_FALLBACK_NOTICE)
        return DEFAULT_LANGUAGE
    return language


def choose_messages(console: Console, locales_dir: Path) -> Messages:
    default_messages = load_messages(DEFAULT_LANGUAGE, locales_dir)
    language = select_language(console, default_messages)
    if language == DEFAULT_LANGUAGE:
        return default_messages
    return load_messages(language, locales_dir)
