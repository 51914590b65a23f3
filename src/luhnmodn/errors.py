"""
Error types for the luhnmodn library.

Every failure raised by the checksum engine is an input-validation failure
and derives from ``LuhnError``. Callers branch on the concrete class; errors
that concern a specific character carry it in ``.character``.
"""

from typing import Optional


class LuhnError(ValueError):
    """Base exception for Luhn mod N errors"""

    def __init__(self, message: str, character: Optional[str] = None):
        super().__init__(message)
        self.character = character

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.character == other.character

    def __hash__(self):
        return hash((type(self).__name__, self.character))

    def __reduce__(self):
        if type(self) is LuhnError:
            return (LuhnError, (self.args[0], self.character))
        # Subclasses take the character, not the message, as their argument.
        return (type(self), () if self.character is None else (self.character,))

    def __repr__(self):
        if self.character is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self.character!r})"


class EmptyAlphabetError(LuhnError):
    """The alphabet has no characters"""

    def __init__(self):
        super().__init__("Alphabet cannot be empty")


class DuplicateCharacterError(LuhnError):
    """The alphabet contains the same character more than once"""

    def __init__(self, character: str):
        super().__init__(f"Duplicate character in alphabet: {character!r}", character)


class EmptyInputError(LuhnError):
    """The input is empty, or too short to hold a payload and a check character"""

    def __init__(self):
        super().__init__("Input is empty or too short")


class InvalidCharacterError(LuhnError):
    """The input contains a character that is not in the alphabet"""

    def __init__(self, character: str):
        super().__init__(f"Invalid character for alphabet: {character!r}", character)
