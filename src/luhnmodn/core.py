"""
Core Luhn mod N Algorithm

This module generates and validates a Luhn mod N check character over an
arbitrary alphabet of unique characters. The alphabet size is the numeric
base, so "0123456789" gives the classic Luhn check digit and any other
alphabet gives the same protection for identifiers in that base.

Algorithm Overview:
1. Map each payload character to its codepoint (position in the sorted alphabet)
2. Scan the payload left to right with a factor alternating 1, 2, 1, 2, ...
3. Multiply each codepoint by the factor and sum the product's base-n digits
4. The check codepoint is (n - sum % n) % n

See https://en.wikipedia.org/wiki/Luhn_mod_N_algorithm
"""

from bisect import bisect_left
from typing import Iterable, Iterator, List, Tuple

from luhnmodn.alphabets import get_alphabet
from luhnmodn.errors import (
    DuplicateCharacterError,
    EmptyAlphabetError,
    EmptyInputError,
    InvalidCharacterError,
)
from luhnmodn.log import get_logger, log

logger = get_logger("luhnmodn.core")


class Luhn:
    """
    Generates or validates the Luhn check character for inputs over an alphabet.

    Instances are immutable. Two instances built from the same set of
    characters behave identically regardless of declaration order.
    """

    __slots__ = ("_alphabet",)

    def __init__(self, alphabet: Iterable[str]):
        """
        Args:
            alphabet: String or iterable of single characters, each unique

        Raises:
            EmptyAlphabetError: If the alphabet has no characters
            DuplicateCharacterError: On the first character seen twice
            TypeError: If an element is not a single-character string
        """
        chars = list(alphabet)
        if not chars:
            raise EmptyAlphabetError()

        seen = set()
        for ch in chars:
            if not isinstance(ch, str) or len(ch) != 1:
                raise TypeError(f"Alphabet elements must be single characters, got {ch!r}")
            if ch in seen:
                raise DuplicateCharacterError(ch)
            seen.add(ch)

        object.__setattr__(self, "_alphabet", tuple(sorted(chars)))
        log(logger, "debug", "Luhn engine created", base=len(chars))

    @classmethod
    def from_preset(cls, name: str) -> "Luhn":
        """Create an engine from a named alphabet (see luhnmodn.alphabets)."""
        return cls(get_alphabet(name))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def alphabet(self) -> str:
        """The alphabet's characters in code point order."""
        return "".join(self._alphabet)

    def __len__(self) -> int:
        return len(self._alphabet)

    def __contains__(self, ch) -> bool:
        if not isinstance(ch, str):
            return False
        i = bisect_left(self._alphabet, ch)
        return i < len(self._alphabet) and self._alphabet[i] == ch

    def __eq__(self, other):
        if not isinstance(other, Luhn):
            return NotImplemented
        return self._alphabet == other._alphabet

    def __hash__(self):
        return hash(self._alphabet)

    def __reduce__(self):
        return (type(self), (self.alphabet,))

    def __repr__(self):
        return f"Luhn({self.alphabet!r})"

    def _codepoint_from_character(self, ch: str) -> int:
        i = bisect_left(self._alphabet, ch)
        if i == len(self._alphabet) or self._alphabet[i] != ch:
            raise InvalidCharacterError(ch)
        return i

    def _character_from_codepoint(self, cp: int) -> str:
        return self._alphabet[cp]

    def generate(self, payload: str) -> str:
        """
        Generate the Luhn check character for a payload.

        Args:
            payload: Characters to protect, all drawn from the alphabet

        Returns:
            The single check character to append to the payload

        Raises:
            EmptyInputError: If the payload is empty
            InvalidCharacterError: On the first character not in the alphabet
        """
        if len(payload) == 0:
            raise EmptyInputError()

        total = sum(addend for _, _, _, addend in self._addends(payload))
        return self._check_character(total)

    def generate_with_steps(self, payload: str) -> Tuple[str, List[str]]:
        """
        Generate the check character with a record of every arithmetic step.

        Args:
            payload: Characters to protect, all drawn from the alphabet

        Returns:
            Tuple of (check_character, execution_steps)
        """
        if len(payload) == 0:
            raise EmptyInputError()

        n = len(self._alphabet)
        steps = [f"Alphabet base: {n}", f"Payload: {payload!r} ({len(payload)} characters)"]
        total = 0
        for position, (ch, codepoint, factor, addend) in enumerate(self._addends(payload)):
            total += addend
            steps.append(
                f"Position {position}: {ch!r} -> codepoint {codepoint}, "
                f"factor {factor}, addend {addend}, sum {total}"
            )

        check = self._check_character(total)
        steps.append(f"Remainder: {total % n}")
        steps.append(f"Check codepoint: {(n - total % n) % n} -> {check!r}")
        return check, steps

    def _addends(self, payload: str) -> Iterator[Tuple[str, int, int, int]]:
        # Factor starts at 1 on the leftmost character, so the position next
        # to the appended check character gets factor 2 for even lengths.
        n = len(self._alphabet)
        factor = 1
        for ch in payload:
            codepoint = self._codepoint_from_character(ch)

            addend = factor * codepoint
            yield ch, codepoint, factor, (addend // n) + (addend % n)
            factor = 1 if factor == 2 else 2

    def _check_character(self, total: int) -> str:
        # The base is always the alphabet size, never the payload length.
        n = len(self._alphabet)
        remainder = total % n
        check_codepoint = (n - remainder) % n
        return self._character_from_codepoint(check_codepoint)

    def validate(self, text: str) -> bool:
        """
        Validate a string whose final character is its Luhn check character.

        Raises:
            EmptyInputError: If the string has fewer than two characters
            InvalidCharacterError: If the payload has a character not in the alphabet
        """
        if len(text) <= 1:
            raise EmptyInputError()

        head, check = text[:-1], text[-1]
        return check == self.generate(head)

    def validate_with(self, payload: str, check: str) -> bool:
        """
        Validate a payload against a separately supplied check character.

        Raises:
            EmptyInputError: If the payload has fewer than two characters
            InvalidCharacterError: If the payload has a character not in the alphabet
        """
        if len(payload) <= 1:
            raise EmptyInputError()

        return check == self.generate(payload)

    def append(self, payload: str) -> str:
        """Return the payload with its check character appended."""
        return payload + self.generate(payload)
