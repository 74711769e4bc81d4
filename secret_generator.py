"""
Secret generation for password-like form fields.
"""

import logging
import secrets

logger = logging.getLogger(__name__)

DEFAULT_SECRET_LENGTH = 32
MIN_SECRET_LENGTH = 16
MAX_SECRET_LENGTH = 128


class SecretGenerationError(RuntimeError):
    """Raised when no secure randomness source is available."""


def validate_secret_length(length) -> bool:
    """Secret lengths are even integers within the supported range."""
    if isinstance(length, bool) or not isinstance(length, int):
        return False
    return MIN_SECRET_LENGTH <= length <= MAX_SECRET_LENGTH and length % 2 == 0


def generate_secret(length: int = DEFAULT_SECRET_LENGTH) -> str:
    """
    Generate a random lowercase hex token of exactly `length` characters.
    """
    if not validate_secret_length(length):
        raise ValueError(
            f"Secret length must be an even integer between "
            f"{MIN_SECRET_LENGTH} and {MAX_SECRET_LENGTH}. Got: {length!r}"
        )

    try:
        token = secrets.token_hex(length // 2)
    except (NotImplementedError, OSError) as e:
        logger.error("Secure random source unavailable: %s", e)
        raise SecretGenerationError("Secure random source unavailable") from e

    if len(token) != length:
        raise SecretGenerationError(
            f"Generated secret has length {len(token)}, expected {length}"
        )

    logger.debug("Generated secret of length %d", length)
    return token
