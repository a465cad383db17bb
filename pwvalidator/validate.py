"""Check a password against a minimum entropy."""

from .base import classify, LOWER_CHARS, UPPER_CHARS, DIGITS_CHARS
from .base import OTHER_SPECIAL_CHARS, REPLACE_CHARS, SEP_CHARS
from .entropy import get_entropy


class InsecurePasswordError(ValueError):
    """Raised when a password is too weak; the message is safe to show."""


def validate(password: str, min_entropy: float) -> None:
    """Raise InsecurePasswordError unless ``password`` reaches ``min_entropy``.

    The error message suggests how the password can be strengthened.
    """
    if get_entropy(password) >= min_entropy:
        return

    groups = {classify(char) for char in password}

    suggestions = []
    if not {OTHER_SPECIAL_CHARS, SEP_CHARS, REPLACE_CHARS} <= groups:
        suggestions.append("including more special characters")
    if LOWER_CHARS not in groups:
        suggestions.append("using lowercase letters")
    if UPPER_CHARS not in groups:
        suggestions.append("using uppercase letters")
    if DIGITS_CHARS not in groups:
        suggestions.append("using numbers")

    if suggestions:
        raise InsecurePasswordError(
            f"insecure password, try {', '.join(suggestions)} "
            "or using a longer password"
        )
    raise InsecurePasswordError("insecure password, try using a longer password")