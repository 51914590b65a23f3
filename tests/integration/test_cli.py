"""
End-to-end tests for the luhnmodn command line program.

Each test runs the CLI in a subprocess, the way a user would.
"""

import os


def test_generate(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["generate", "0123456789", "7992739871"])

    assert result.returncode == 0
    assert result.stdout.strip() == "The check character is: 3"


def test_generate_base6(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["generate", "abcdef", "abcdef"])

    assert result.returncode == 0
    assert "The check character is: e" in result.stdout


def test_generate_with_steps(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["generate", "--steps", "abcdef", "abcdef"])

    assert result.returncode == 0
    assert "Alphabet base: 6" in result.stdout
    assert "Check codepoint: 4 -> 'e'" in result.stdout


def test_generate_with_preset(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["generate", "--preset", "decimal", "7992739871"])

    assert result.returncode == 0
    assert "The check character is: 3" in result.stdout


def test_generate_duplicate_alphabet(cli_test_env):
    """Errors are reported as a message, never a traceback."""
    run_command, _ = cli_test_env

    result = run_command(["generate", "abcdea", "abc"])

    assert result.returncode == 1
    assert "Error creating Luhn: Duplicate character in alphabet: 'a'" in result.stderr
    assert "Traceback" not in result.stderr


def test_generate_invalid_character(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["generate", "abcdef", "012345"])

    assert result.returncode == 1
    assert "Invalid character for alphabet: '0'" in result.stderr
    assert "Traceback" not in result.stderr


def test_generate_empty_alphabet(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["generate", "", "abc"])

    assert result.returncode == 1
    assert "Alphabet cannot be empty" in result.stderr


def test_generate_unknown_preset(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["generate", "--preset", "base7", "abc"])

    assert result.returncode == 1
    assert "Unknown alphabet 'base7'" in result.stderr


def test_generate_missing_arguments(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["generate", "abcdef"])

    assert result.returncode == 2
    assert "Usage:" in result.stderr


def test_validate(cli_test_env):
    run_command, _ = cli_test_env

    valid = run_command(["validate", "abcdef", "abcdefe"])
    invalid = run_command(["validate", "abcdef", "abcdefd"])

    assert valid.returncode == 0
    assert valid.stdout.strip() == "valid"
    assert invalid.returncode == 1
    assert invalid.stdout.strip() == "invalid"


def test_validate_with_check(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["validate", "--check", "e", "abcdef", "abcdef"])

    assert result.returncode == 0
    assert result.stdout.strip() == "valid"


def test_validate_too_short(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["validate", "abcdef", "a"])

    assert result.returncode == 1
    assert "Input is empty or too short" in result.stderr


def test_analyze(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(
        ["analyze", "--preset", "decimal", "--count", "5", "--length", "6"]
    )

    assert result.returncode == 0
    assert "Error detection (base 10)" in result.stdout
    assert "single_substitution" in result.stdout
    assert "100.00%" in result.stdout


def test_alphabets(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["alphabets"])

    assert result.returncode == 0
    for name in ["decimal", "hex", "base58", "base64url"]:
        assert name in result.stdout


def test_verbose_logs_to_stderr(cli_test_env):
    run_command, _ = cli_test_env

    result = run_command(["--verbose", "generate", "abcdef", "abcdef"])

    assert result.returncode == 0
    assert "DEBUG [luhnmodn.cli]: generate" in result.stderr


def test_log_level_from_environment(cli_test_env):
    run_command, _ = cli_test_env
    env = dict(os.environ, LUHNMODN_LOG_LEVEL="DEBUG")

    result = run_command(["generate", "abcdef", "abcdef"], env=env)

    assert result.returncode == 0
    assert "DEBUG [luhnmodn.core]: Luhn engine created | base=6" in result.stderr
