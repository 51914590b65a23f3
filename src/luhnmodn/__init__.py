"""
luhnmodn - Luhn mod N check characters over arbitrary alphabets

This library generalizes the decimal Luhn check digit to any alphabet of
unique characters. The alphabet size is the numeric base, so hexadecimal,
base36, base58 or a custom symbol set all get a single check character that
catches every single-character substitution (in even bases) and most
adjacent transpositions.

Example Usage:
    from luhnmodn import Luhn

    luhn = Luhn("0123456789")
    luhn.generate("7992739871")        # '3'
    luhn.validate("79927398713")       # True
    luhn.validate_with("7992739871", "3")  # True

    # Named alphabets
    luhn = Luhn.from_preset("base58")
    luhn.append("3yQ8")                # payload with check character appended

Errors are raised as subclasses of LuhnError (itself a ValueError):
EmptyAlphabetError, DuplicateCharacterError, EmptyInputError and
InvalidCharacterError. The last two carry the offending character in
``.character``.
"""

# Core engine
from .core import Luhn

# Error taxonomy
from .errors import (
    LuhnError,
    EmptyAlphabetError,
    DuplicateCharacterError,
    EmptyInputError,
    InvalidCharacterError,
)

# Named alphabets
from .alphabets import (
    ALPHABET_DEFINITIONS,
    BASE58_ALPHABET,
    BASE58L_ALPHABET,
    get_alphabet,
    get_alphabet_info,
    get_available_alphabets,
)

# Analysis
from .utils import (
    generate_test_payloads,
    create_error_scenarios,
    analyze_error_detection,
)

# Public API
__all__ = [
    # Core
    "Luhn",
    # Errors
    "LuhnError",
    "EmptyAlphabetError",
    "DuplicateCharacterError",
    "EmptyInputError",
    "InvalidCharacterError",
    # Alphabets
    "ALPHABET_DEFINITIONS",
    "BASE58_ALPHABET",
    "BASE58L_ALPHABET",
    "get_alphabet",
    "get_alphabet_info",
    "get_available_alphabets",
    # Analysis
    "generate_test_payloads",
    "create_error_scenarios",
    "analyze_error_detection",
]

__version__ = "0.1.0"
__description__ = "Luhn mod N check characters over arbitrary alphabets"
