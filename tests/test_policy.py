import pytest
from pydantic import ValidationError

from passgen import DIGITS, LOWERCASE, UPPERCASE, InvalidLengthError
from passgen.policy import PasswordPolicy


def test_default_policy_matches_default_settings():
    policy = PasswordPolicy.from_settings()
    assert policy == PasswordPolicy()
    assert policy.min_length == 16
    assert policy.required_length == 3


def test_policy_reads_environment(monkeypatch):
    monkeypatch.setenv("PASSGEN_MIN_LENGTH", "10")
    monkeypatch.setenv("PASSGEN_MAX_LENGTH", "14")
    monkeypatch.setenv("PASSGEN_SYMBOLS", " !@#$ ")
    monkeypatch.setenv("PASSGEN_SYMBOLS_MIN", "2")
    policy = PasswordPolicy.from_settings()
    assert (policy.min_length, policy.max_length) == (10, 14)
    assert policy.symbols == "!@#$"
    assert policy.symbols_min == 2


def test_invalid_setting_values_fail_validation(monkeypatch):
    monkeypatch.setenv("PASSGEN_DIGITS_MIN", "-1")
    with pytest.raises(ValidationError):
        PasswordPolicy.from_settings()


def test_max_below_min_is_rejected():
    with pytest.raises(ValidationError):
        PasswordPolicy(min_length=12, max_length=8)


def test_symbol_minimum_requires_symbols():
    with pytest.raises(ValidationError):
        PasswordPolicy(symbols_min=2)


def test_policy_is_frozen():
    policy = PasswordPolicy()
    with pytest.raises(ValidationError):
        policy.min_length = 4


def test_generator_registers_letter_and_digit_sets():
    g = PasswordPolicy(lowercase_min=2, uppercase_min=0, digits_min=5).build_generator()
    assert ["".join(cs.characters) for cs in g.charsets] == [LOWERCASE, UPPERCASE, DIGITS]
    assert g.min_total == 7
    assert g.pool_size == 62


def test_generator_adds_symbols_when_configured(zero_random):
    g = PasswordPolicy(symbols="!?", symbols_min=1).build_generator(zero_random)
    assert g.charsets[-1].characters == ("!", "?")
    assert g.min_total == 4
    assert g.random is zero_random


def test_generate_honours_policy():
    policy = PasswordPolicy(min_length=12, max_length=20, digits_min=4, symbols="#%&", symbols_min=3)
    for _ in range(500):
        password = policy.generate()
        assert 12 <= len(password) <= 20
        assert sum(c in DIGITS for c in password) >= 4
        assert sum(c in "#%&" for c in password) >= 3
        assert any(c in LOWERCASE for c in password)
        assert any(c in UPPERCASE for c in password)


def test_generate_with_unsatisfiable_minimums_is_invalid():
    policy = PasswordPolicy(min_length=4, max_length=4, digits_min=4)
    with pytest.raises(InvalidLengthError):
        policy.generate()
