# --- START OF FILE passgen/password_generator.py ---

import logging
from dataclasses import dataclass
from threading import Lock
from typing import Callable, List, Optional, Sequence, Tuple

from .errors import InvalidLengthError, NoCharactersError, ProviderError
from .random_provider import RandomProvider, get_default_random

logger = logging.getLogger(__name__)

# Character sets declared for ease of use. These are not auto-included in a password.
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS = "0123456789"


@dataclass(frozen=True)
class CharacterSet:
    """A set of characters and the minimum number of them that must be in a password."""
    characters: Tuple[str, ...]
    minimum: int = 0

    def __len__(self):
        return len(self.characters)


@dataclass
class _Builder:
    charsets: List[CharacterSet]
    min_total: int = 0
    pool_size: int = 0
    random: Optional[RandomProvider] = None


Option = Callable[[_Builder], None]


def with_characters(characters: Sequence[str], minimum: int = 0) -> Option:
    """
    Registers a character set and the minimum number of characters from it
    that every password must contain.
    """
    if isinstance(minimum, bool) or not isinstance(minimum, int) or minimum < 0:
        raise ValueError(f"Minimum must be a non-negative integer, got {minimum!r}.")
    charset = CharacterSet(characters=tuple(characters), minimum=minimum)
    if charset.minimum and not charset.characters:
        raise ValueError(f"An empty character set cannot have a minimum of {minimum}.")

    def apply(builder: _Builder):
        builder.charsets.append(charset)
        builder.min_total += charset.minimum
        builder.pool_size += len(charset)

    return apply


def with_random(provider: RandomProvider) -> Option:
    """Lets the caller replace the default secure randomness provider."""
    if not callable(getattr(provider, 'get', None)):
        raise TypeError("A randomness provider must implement get(bound).")

    def apply(builder: _Builder):
        builder.random = provider

    return apply


def new_generator(*options: Option) -> "Generator":
    """
    Builds a password generator from the given options, applied in order.
    Raises NoCharactersError if no selectable characters were registered.
    """
    builder = _Builder(charsets=[])
    for option in options:
        option(builder)
    if builder.pool_size == 0:
        raise NoCharactersError()
    if builder.random is None:
        builder.random = get_default_random()
    generator = Generator(builder)
    logger.debug(
        f"Password generator configured with {len(builder.charsets)} character set(s), "
        f"pool size {builder.pool_size}, minimum length {builder.min_total}."
    )
    return generator


def shuffle(random: RandomProvider, chars: List[str]):
    """Rearranges the characters in place into a uniformly random order."""
    n = len(chars)
    for i in range(n - 1):
        k = _draw(random, n - i)
        chars[i], chars[i + k] = chars[i + k], chars[i]


def _draw(random: RandomProvider, bound: int) -> int:
    try:
        value = random.get(bound)
    except ProviderError:
        raise
    except Exception as e:
        raise ProviderError(f"Randomness provider failed: {e}") from e
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < bound:
        raise ProviderError(f"Randomness provider returned {value!r}, expected an integer in [0, {bound}).")
    return value


class Generator:
    """
    Password generator over an immutable list of character sets.
    Instances hold no mutable state and can be shared between threads as long
    as the randomness provider can.
    """

    def __init__(self, builder: _Builder):
        self._charsets = tuple(builder.charsets)
        self._min_total = builder.min_total
        self._pool_size = builder.pool_size
        self._random = builder.random

    @property
    def charsets(self) -> Tuple[CharacterSet, ...]:
        return self._charsets

    @property
    def min_total(self) -> int:
        """Sum of all per-set minimums, the shortest password this generator can produce."""
        return self._min_total

    @property
    def pool_size(self) -> int:
        return self._pool_size

    @property
    def random(self) -> RandomProvider:
        return self._random

    def generate(self, min_length: int, max_length: int) -> str:
        """
        Returns a password of a random length between min_length and max_length.
        The lower bound is raised to min_total when the set minimums require it.
        """
        try:
            length = self.select_length(min_length, max_length)
            chars = self.select_characters(length)
            shuffle(self._random, chars)
        except (InvalidLengthError, ProviderError) as e:
            logger.warning(f"Password generation failed: {e}")
            raise
        return "".join(chars)

    def select_length(self, min_length: int, max_length: int) -> int:
        """Returns a length drawn uniformly from [max(min_length, min_total), max_length]."""
        for value in (min_length, max_length):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidLengthError(f"Password lengths must be non-negative integers, got {value!r}.")
        if max_length < min_length:
            raise InvalidLengthError(
                f"Invalid password length: maximum {max_length} is smaller than minimum {min_length}."
            )
        if max_length < self._min_total:
            raise InvalidLengthError(
                f"Invalid password length: maximum {max_length} cannot fit the "
                f"{self._min_total} required characters."
            )
        effective_min = max(min_length, self._min_total)
        return effective_min + _draw(self._random, max_length - effective_min + 1)

    def select_characters(self, length: int) -> List[str]:
        """
        Returns length characters selected at random. The minimums of each set come
        first, in registration order, so the result has a pattern and must be
        shuffled before use.
        """
        if length < self._min_total:
            raise InvalidLengthError(
                f"Cannot select {length} characters when {self._min_total} are required."
            )
        chars = []
        for charset in self._charsets:
            for _ in range(charset.minimum):
                chars.append(charset.characters[_draw(self._random, len(charset))])

        # The rest is picked from all sets combined, including already satisfied ones.
        for _ in range(length - self._min_total):
            charset, offset = self.locate(_draw(self._random, self._pool_size))
            chars.append(charset.characters[offset])
        return chars

    def locate(self, index: int) -> Tuple[CharacterSet, int]:
        """
        Maps an index into the virtual concatenation of all character sets to the
        set that holds it and the offset within that set.
        """
        if not 0 <= index < self._pool_size:
            raise IndexError(f"Pool index {index} out of range [0, {self._pool_size}).")
        for charset in self._charsets:
            if index < len(charset):
                return charset, index
            index -= len(charset)
        raise IndexError(f"Pool index {index} out of range.")

    def __repr__(self):
        return (f"Generator(charsets={len(self._charsets)}, min_total={self._min_total}, "
                f"pool_size={self._pool_size}, random={self._random!r})")


_secret_generator = None
_secret_lock = Lock()


def generate_secure_secret(length=16):
    """
    Generates a cryptographically secure random string suitable for API secrets.
    Ensures compliance with common requirements:
    - Exactly `length` characters (default 16)
    - At least one uppercase letter
    - At least one lowercase letter
    - At least one digit
    """
    global _secret_generator
    if _secret_generator is None:
        with _secret_lock:
            if _secret_generator is None:
                _secret_generator = new_generator(
                    with_characters(LOWERCASE, 1),
                    with_characters(UPPERCASE, 1),
                    with_characters(DIGITS, 1),
                )
    secret = _secret_generator.generate(length, length)
    logger.debug(f"Generated secure secret of length {len(secret)}.")
    return secret

# --- END OF FILE passgen/password_generator.py ---
