# --- START OF FILE passgen/policy.py ---

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from . import settings_manager
from .password_generator import (
    DIGITS,
    LOWERCASE,
    UPPERCASE,
    Generator,
    new_generator,
    with_characters,
    with_random,
)
from .random_provider import RandomProvider

logger = logging.getLogger(__name__)


class PasswordPolicy(BaseModel):
    """
    Password requirements expressed as data, typically loaded from settings.
    Lowercase letters, uppercase letters and digits are always in the pool;
    symbols are only used when a symbol set is configured.
    """
    model_config = ConfigDict(frozen=True)

    min_length: int = Field(16, ge=0, description="The shortest password to generate. Raised to the sum of the set minimums when smaller.")
    max_length: int = Field(16, ge=0, description="The longest password to generate.")
    lowercase_min: int = Field(1, ge=0, description="Minimum number of lowercase letters.")
    uppercase_min: int = Field(1, ge=0, description="Minimum number of uppercase letters.")
    digits_min: int = Field(1, ge=0, description="Minimum number of digits.")
    symbols: str = Field('', description="Symbol characters to include in the pool, e.g. '!@#$%'. Empty to disable symbols. Surrounding whitespace is ignored.")
    symbols_min: int = Field(0, ge=0, description="Minimum number of symbols. Requires 'symbols' to be set.")

    @field_validator('symbols')
    def strip_whitespace(cls, v):
        return v.strip()

    @model_validator(mode='after')
    def check_requirements(self):
        if self.max_length < self.min_length:
            raise ValueError("'max_length' must be greater than or equal to 'min_length'.")
        if self.symbols_min and not self.symbols:
            raise ValueError("'symbols_min' requires a non-empty 'symbols' set.")
        return self

    @property
    def required_length(self) -> int:
        return self.lowercase_min + self.uppercase_min + self.digits_min + self.symbols_min

    @classmethod
    def from_settings(cls) -> "PasswordPolicy":
        """Builds a policy from the PASSGEN_* settings, falling back to defaults."""
        settings = settings_manager.get_all_settings()
        return cls(**{name: settings[name] for name in cls.model_fields if name in settings})

    def build_generator(self, random: Optional[RandomProvider] = None) -> Generator:
        options = [
            with_characters(LOWERCASE, self.lowercase_min),
            with_characters(UPPERCASE, self.uppercase_min),
            with_characters(DIGITS, self.digits_min),
        ]
        if self.symbols:
            options.append(with_characters(self.symbols, self.symbols_min))
        if random is not None:
            options.append(with_random(random))
        return new_generator(*options)

    def generate(self, random: Optional[RandomProvider] = None) -> str:
        """Generates a single password that satisfies this policy."""
        password = self.build_generator(random).generate(self.min_length, self.max_length)
        logger.debug(f"Generated password of length {len(password)} from policy.")
        return password

# --- END OF FILE passgen/policy.py ---
