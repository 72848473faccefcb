# --- START OF FILE passgen/random_provider.py ---

import secrets
from abc import ABC, abstractmethod
from threading import Lock

from .errors import ProviderError


class RandomProvider(ABC):
    """
    Source of bounded random integers used by the password generator.
    Custom implementations can be injected for deterministic tests; they must
    return a value in [0, bound) or raise.
    """

    @abstractmethod
    def get(self, bound: int) -> int:
        """Returns a uniformly distributed integer in the range [0, bound)."""


class SecureRandom(RandomProvider):
    """
    Default provider backed by the operating system CSPRNG.
    secrets.randbelow uses rejection sampling, so there is no modulo bias.
    """

    def get(self, bound: int) -> int:
        if bound <= 0:
            raise ValueError(f"Bound must be a positive integer, got {bound}.")
        try:
            return secrets.randbelow(bound)
        except OSError as e:
            raise ProviderError(f"Failed to read from the system entropy source: {e}") from e

    def __repr__(self):
        return "SecureRandom()"


_default_random = None
_default_lock = Lock()


def get_default_random() -> RandomProvider:
    """
    Returns the process-wide SecureRandom instance, creating it on first use.
    """
    global _default_random
    if _default_random is None:
        with _default_lock:
            if _default_random is None:
                _default_random = SecureRandom()
    return _default_random

# --- END OF FILE passgen/random_provider.py ---
