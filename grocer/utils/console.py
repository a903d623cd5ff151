import sys
from typing import Callable, Optional


def _print_error(text: str) -> None:
    print(text, file=sys.stderr)


class Console:
    """Line-based terminal I/O.

    ``read`` is called with a prompt and returns one line, ``write`` prints one
    line to stdout and ``write_error`` one line to stderr. All default to the
    real terminal.
    """

    def __init__(self, read: Optional[Callable[[str], str]] = None,
                 write: Optional[Callable[[str], None]] = None,
                 write_error: Optional[Callable[[str], None]] = None):
        self._read = read or input
        self._write = write or print
        self._write_error = write_error or _print_error

    def say(self, text: str = '') -> None:
        self._write(text)

    def error(self, text: str) -> None:
        self._write_error(text)

    def ask(self, prompt: str) -> str:
        return self._read(prompt)

    def read_valid_integer(self, prompt: str, invalid_text: str) -> int:
        """Ask until the answer parses as an integer."""
        while True:
            try:
                return int(self.ask(prompt).strip())
            except ValueError:
                self.say(invalid_text)
