"""
Random hex ID generator for contribution sessions.

Format: {hex}
- size is the number of hex characters, always even (2 chars per byte)
- session IDs default to 10 chars = 5 random bytes = 40 bits

16^10 = 1.1 trillion unique session IDs
"""
import re
import secrets

from ..errors import InvalidInputError

DEFAULT_SESSION_ID_SIZE = 10
MIN_SESSION_ID_SIZE = 10  # 40 bits of randomness

HEX_PATTERN = re.compile(r'^[0-9a-f]+$')


def generate_hex_id(size: int) -> str:
    """
    Generate a random lowercase hex string.

    Args:
        size: Number of hex characters (must be a positive even number)

    Returns:
        Hex string like '9f86d08188'

    Raises:
        InvalidInputError: If size is odd or not positive
    """
    if size <= 0:
        raise InvalidInputError(f"ID size must be positive, got {size}")
    if size % 2 == 1:
        raise InvalidInputError("Only even sizes are supported")

    return secrets.token_hex(size // 2)


def generate_session_id(size: int = DEFAULT_SESSION_ID_SIZE) -> str:
    """
    Generate a new contribution session ID.

    Raises:
        InvalidInputError: If size is invalid or below the 40-bit minimum
    """
    if size < MIN_SESSION_ID_SIZE:
        raise InvalidInputError(
            f"Session ID size must be at least {MIN_SESSION_ID_SIZE} hex chars, got {size}"
        )
    return generate_hex_id(size)


def validate_hex_id(id_str: str, size: int = DEFAULT_SESSION_ID_SIZE) -> bool:
    """
    Check if a string is a hex ID of the given size.

    Args:
        id_str: String to validate
        size: Expected number of hex characters

    Returns:
        True if valid, False otherwise
    """
    if not id_str or not isinstance(id_str, str):
        return False
    return len(id_str) == size and bool(HEX_PATTERN.match(id_str))
