"""Console prompting and small text-validation helpers."""

from __future__ import annotations

import re
import sys
from typing import Iterable, List, Optional, TextIO

_LINE_LIMIT = 4096
_ATOI = re.compile(r"\s*([+-]?\d*)")
_ATOF = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class InputError(ValueError):
    """Raised when the user gives no acceptable answer."""


def _atoi(text: str) -> int:
    digits = _ATOI.match(text).group(1)
    return int(digits) if digits.lstrip("+-") else 0


def _atof(text: str) -> float:
    match = _ATOF.match(text)
    return float(match.group(1)) if match else 0.0


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` holds only digits, with an optional leading sign.

    An empty string, or a lone sign, counts as numeric.
    """
    body = text[1:] if text[:1] in ("+", "-") else text
    return all("0" <= char <= "9" for char in body)


def is_float(text: str) -> bool:
    """Tell whether ``text`` is acceptable as a real number.

    The only thing rejected is a second decimal point.
    """
    return text.count(".") < 2


def is_binary(text: str) -> bool:
    """Tell whether ``text`` starts with a binary digit."""
    return text[:1] in ("0", "1")


def format_name(text: str) -> str:
    """Lower-case ``text`` and capitalise its first character."""
    lowered = text.lower()
    return lowered[:1].upper() + lowered[1:]


def round_decimal(text: str) -> str:
    """Round up the digit before each point followed by a digit above five.

    The digit before the point is incremented (keeping only the first
    character of the result) and the digit after the point becomes ``0``.
    """
    chars = list(text)
    for position, char in enumerate(chars):
        if char != "." or position == 0 or position + 1 >= len(chars):
            continue
        if chars[position + 1] > "5":
            previous = chars[position - 1]
            digit = int(previous) if previous.isdigit() else 0
            chars[position - 1] = str(digit + 1)[0]
            chars[position + 1] = "0"
    return "".join(chars)


def sort_numbers(values: Iterable[int], descending: bool = False) -> List[int]:
    """Return the numbers sorted, ascending unless ``descending`` is true."""
    return sorted(values, reverse=bool(descending))


class Prompter:
    """Asks questions on a text stream and validates the answers."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def say(self, message: str) -> None:
        """Write ``message`` followed by a newline."""
        self._write(f"{message}\n")

    def read_line(self, max_length: int = _LINE_LIMIT) -> str:
        """Read one line without its newline.

        Raises EOFError at end of input and InputError when the line is
        longer than ``max_length``.
        """
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        line = self.stdin.readline()
        if line == "":
            raise EOFError("no more input")
        if line.endswith("\n"):
            line = line[:-1]
        if len(line) > max_length:
            raise InputError(f"input longer than {max_length} characters")
        return line

    def text(self, message: str, error: str, max_length: int) -> str:
        """Ask once for a non-numeric text of at most ``max_length`` characters."""
        self.say(message)
        try:
            answer = self.read_line(max_length)
        except InputError:
            answer = None
        if answer is None or is_numeric(answer):
            self.say(error)
            raise InputError(error)
        return answer

    def _read_int(self) -> Optional[int]:
        try:
            line = self.read_line(_LINE_LIMIT)
        except InputError:
            return None
        return _atoi(line) if is_numeric(line) else None

    def _read_float(self) -> Optional[float]:
        try:
            line = self.read_line(_LINE_LIMIT)
        except InputError:
            return None
        if not is_float(line):
            return None
        self.say(line)
        return _atof(line)

    def integer(self, message: str, error: str, minimum: int, maximum: int, attempts: int) -> int:
        """Ask for an integer in ``[minimum, maximum]``, retrying ``attempts`` times."""
        if minimum > maximum or attempts < 0:
            raise ValueError("invalid range or number of attempts")
        while attempts >= 0:
            self._write(message)
            value = self._read_int()
            if value is not None and minimum <= value <= maximum:
                return value
            attempts -= 1
            shown = "" if value is None else f"Usted ingreso {value}"
            self._write(f"{shown}\n{error}/// Intentos restantes:{attempts}  \n")
        raise InputError(error)

    def real(self, message: str, error: str, minimum: float, maximum: float, attempts: int) -> float:
        """Ask for a real number in ``[minimum, maximum]``, retrying ``attempts`` times."""
        if minimum > maximum or attempts < 0:
            raise ValueError("invalid range or number of attempts")
        while attempts >= 0:
            self._write(message)
            value = self._read_float()
            if value is not None and minimum <= value <= maximum:
                return value
            attempts -= 1
            self._write(f"{error} intentos restantes {attempts} ")
        raise InputError(error)

    def binary(self, message: str, error: str, max_length: int, attempts: int) -> int:
        """Ask for a value starting with a binary digit and return it as a decimal integer."""
        if max_length <= 0 or attempts <= 0:
            raise ValueError("max_length and attempts must be positive")
        while attempts >= 0:
            self.say(message)
            try:
                line = self.read_line(max_length)
            except InputError:
                line = None
            if line is not None and is_binary(line):
                return _atoi(line)
            self._write(f"{error} \nIntentos restantes {attempts} ")
            attempts -= 1
        raise InputError(error)