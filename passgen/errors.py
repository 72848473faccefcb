# --- START OF FILE passgen/errors.py ---

class PasswordError(Exception):
    """Base class for every error raised by passgen."""


class NoCharactersError(PasswordError, ValueError):
    """Raised when a generator is built without any selectable characters."""

    def __init__(self, message="No characters specified"):
        super().__init__(message)


class InvalidLengthError(PasswordError, ValueError):
    """Raised when the requested length range cannot produce a password."""

    def __init__(self, message="Invalid password length"):
        super().__init__(message)


class ProviderError(PasswordError, RuntimeError):
    """Raised when the randomness provider fails or misbehaves."""

# --- END OF FILE passgen/errors.py ---
