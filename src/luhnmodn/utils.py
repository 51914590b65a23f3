"""
Utility functions for luhnmodn: test payloads and error-detection analysis.
"""

import secrets
from typing import Any, Dict, List, Optional

from luhnmodn import config
from luhnmodn.core import Luhn
from luhnmodn.errors import LuhnError


def generate_test_payloads(
    alphabet: str,
    count: int = config.DEFAULT_PAYLOAD_COUNT,
    length: int = config.DEFAULT_PAYLOAD_LENGTH,
) -> List[str]:
    """Generate random payloads over an alphabet for analysis"""
    if count <= 0:
        raise ValueError("Payload count must be positive")
    if length <= 0:
        raise ValueError("Payload length must be positive")

    return [
        "".join(secrets.choice(alphabet) for _ in range(length)) for _ in range(count)
    ]


def create_error_scenarios(
    text: str, alphabet: str, limit: Optional[int] = None
) -> List[Dict[str, Any]]:
    """
    Create the typing errors a check character is meant to catch.

    Builds every single-character substitution and every adjacent
    transposition of two different characters.

    Args:
        text: Payload with its check character appended
        alphabet: Characters a substitution may introduce
        limit: Maximum number of scenarios per error type
            (defaults to config.MAX_ERROR_SCENARIOS)

    Returns:
        List of scenario dictionaries with type, position and corrupted text
    """
    if limit is None:
        limit = config.MAX_ERROR_SCENARIOS

    substitutions = []
    transpositions = []

    # Single character substitutions
    for pos, original_char in enumerate(text):
        for replacement_char in alphabet:
            if replacement_char == original_char:
                continue
            substitutions.append(
                {
                    "type": "single_substitution",
                    "position": pos,
                    "original_char": original_char,
                    "replacement_char": replacement_char,
                    "corrupted": text[:pos] + replacement_char + text[pos + 1 :],
                    "description": f"Position {pos}: '{original_char}' → '{replacement_char}'",
                }
            )

    # Adjacent transpositions
    for pos in range(len(text) - 1):
        a, b = text[pos], text[pos + 1]
        if a == b:
            continue
        transpositions.append(
            {
                "type": "adjacent_transposition",
                "position": pos,
                "original_char": a,
                "replacement_char": b,
                "corrupted": text[:pos] + b + a + text[pos + 2 :],
                "description": f"Swapped '{a}' and '{b}' at position {pos}",
            }
        )

    return substitutions[:limit] + transpositions[:limit]


def analyze_error_detection(
    engine: Luhn, payloads: List[str], alphabet: Optional[str] = None
) -> Dict[str, Dict[str, Any]]:
    """
    Measure how many single-character errors the check character detects.

    Each payload is checked, corrupted in every way create_error_scenarios
    knows, and validated again. A corruption that validation rejects, or that
    raises a LuhnError, counts as detected.

    Args:
        engine: Checksum engine to analyze
        payloads: Payloads drawn from the engine's alphabet
        alphabet: Substitution characters (defaults to the engine's alphabet)

    Returns:
        Per error type: total, detected, undetected and detection_rate
    """
    if alphabet is None:
        alphabet = engine.alphabet

    results: Dict[str, Dict[str, Any]] = {}
    for payload in payloads:
        checked = engine.append(payload)
        for scenario in create_error_scenarios(checked, alphabet):
            stats = results.setdefault(
                scenario["type"], {"total": 0, "detected": 0, "undetected": 0}
            )
            stats["total"] += 1
            try:
                detected = not engine.validate(scenario["corrupted"])
            except LuhnError:
                detected = True
            if detected:
                stats["detected"] += 1
            else:
                stats["undetected"] += 1

    for stats in results.values():
        stats["detection_rate"] = stats["detected"] / stats["total"]

    return results
