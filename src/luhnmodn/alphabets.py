"""
Named Alphabet Definitions

Common alphabets for check characters, so callers can refer to a base by
name instead of spelling out every character.

Alphabets:
- decimal: 0-9, the classic Luhn base
- hex: lowercase hexadecimal
- base32: RFC 4648 base32
- base36: digits and lowercase letters
- base58: Bitcoin base58 (no 0, O, I, l)
- base58l: lowercase-only base58 variant (33 characters)
- base64url: RFC 4648 URL-safe base64
"""

from dataclasses import dataclass
from typing import Any, Dict, List

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE58L_ALPHABET = "123456789abcdefghijkmnpqrstuvwxyz"  # 33 characters


@dataclass(frozen=True)
class AlphabetDefinition:
    """A named alphabet preset."""

    name: str
    alphabet: str
    description: str


ALPHABET_DEFINITIONS = [
    AlphabetDefinition("decimal", "0123456789", "Decimal digits"),
    AlphabetDefinition("hex", "0123456789abcdef", "Lowercase hexadecimal"),
    AlphabetDefinition("base32", "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567", "RFC 4648 base32"),
    AlphabetDefinition(
        "base36", "0123456789abcdefghijklmnopqrstuvwxyz", "Digits and lowercase letters"
    ),
    AlphabetDefinition("base58", BASE58_ALPHABET, "Bitcoin base58"),
    AlphabetDefinition("base58l", BASE58L_ALPHABET, "Lowercase base58"),
    AlphabetDefinition(
        "base64url",
        "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_",
        "RFC 4648 URL-safe base64",
    ),
]

_BY_NAME = {definition.name: definition for definition in ALPHABET_DEFINITIONS}


def get_available_alphabets() -> List[str]:
    """Get list of available alphabet names."""
    return [definition.name for definition in ALPHABET_DEFINITIONS]


def get_alphabet(name: str) -> str:
    """
    Resolve an alphabet name to its characters.

    Args:
        name: Alphabet name (e.g. "hex", "base58")

    Returns:
        The alphabet as a string

    Raises:
        ValueError: If the name is not recognized
    """
    if name not in _BY_NAME:
        raise ValueError(
            f"Unknown alphabet '{name}'. Valid alphabets: {get_available_alphabets()}"
        )
    return _BY_NAME[name].alphabet


def get_alphabet_info(name: str) -> Dict[str, Any]:
    """
    Get information about a named alphabet.

    Args:
        name: Alphabet name

    Returns:
        Dictionary with name, alphabet, base and description
    """
    alphabet = get_alphabet(name)
    return {
        "name": name,
        "alphabet": alphabet,
        "base": len(alphabet),
        "description": _BY_NAME[name].description,
    }
