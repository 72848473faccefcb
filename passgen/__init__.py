from .errors import InvalidLengthError, NoCharactersError, PasswordError, ProviderError
from .password_generator import (
    DIGITS,
    LOWERCASE,
    UPPERCASE,
    CharacterSet,
    Generator,
    generate_secure_secret,
    new_generator,
    shuffle,
    with_characters,
    with_random,
)
from .random_provider import RandomProvider, SecureRandom, get_default_random

__version__ = "1.0.0"
