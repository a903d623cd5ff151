"""Shared fixtures: a scripted console and a ready shopping session."""

from decimal import Decimal

import pytest

from grocer.models.models import Product
from grocer.models.session import ShopSession
from grocer.store.catalog import Catalog
from grocer.utils.config import BUNDLED_LOCALES_DIR
from grocer.utils.console import Console
from grocer.utils.constants import Language
from grocer.utils.messages import load_messages


class ScriptedConsole(Console):
    """Console that answers prompts from a list and records output."""

    def __init__(self, answers=()):
        self.answers = list(answers)
        self.prompts = []
        self.output = []
        self.errors = []
        super().__init__(read=self._next_answer, write=self.output.append, write_error=self.errors.append)

    def _next_answer(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def feed(self, *answers):
        self.answers.extend(str(a) for a in answers)

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture
def console():
    return ScriptedConsole()


@pytest.fixture
def catalog():
    return Catalog.seeded()


@pytest.fixture
def banana(catalog):
    return catalog.get(1)


@pytest.fixture
def apple(catalog):
    return catalog.get(2)


@pytest.fixture
def free_sample():
    return Product(name="Sample", price=Decimal("0"), category="Promo")


@pytest.fixture
def english():
    return load_messages(Language.ENGLISH, BUNDLED_LOCALES_DIR)


@pytest.fixture
def session(catalog, english, console, tmp_path):
    return ShopSession(
        catalog=catalog,
        messages=english,
        console=console,
        purchases_dir=tmp_path / "purchases"
    )
