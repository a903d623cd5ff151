from enum import Enum

# Menu loop states
RUNNING, EXITING = range(2)

# Main menu options
DISPLAY_PRODUCTS, ADD_PRODUCT, REMOVE_PRODUCT, VIEW_CART, GET_RECEIPT, EXIT = range(1, 7)

SEPARATOR = '-----------------------------'


class Language(Enum):
    ENGLISH = 'en'
    SPANISH = 'es'
    LATVIAN = 'lv'


DEFAULT_LANGUAGE = Language.ENGLISH

# Numbered choices shown before any language is loaded
LANGUAGE_CHOICES = {
    1: Language.ENGLISH,
    2: Language.SPANISH,
    3: Language.LATVIAN,
}

LANGUAGE_NAMES = {
    Language.ENGLISH: 'English',
    Language.SPANISH: 'Spanish',
    Language.LATVIAN: 'Latvian',
}

LANGUAGE_PROMPT = 'Select language:'
LANGUAGE_CHOICE_PROMPT = 'Enter your choice: '
LANGUAGE_FALLBACK_NOTICE = 'Invalid choice! Defaulting to English.'

# Environment defaults
DEFAULT_PURCHASES_DIR = 'purchases'
DEFAULT_LOG_LEVEL = 'WARNING'
