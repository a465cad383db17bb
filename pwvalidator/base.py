"""Estimate the size of the character set a password is drawn from."""

REPLACE_CHARS = "!@$&*"
SEP_CHARS = "_-., "
OTHER_SPECIAL_CHARS = "\"#%'()+/:;<=>?[\\]^{|}~"
LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS_CHARS = "0123456789"

# Checked in this order; a character belongs to the first group containing it.
CHARACTER_GROUPS = (
    REPLACE_CHARS,
    SEP_CHARS,
    OTHER_SPECIAL_CHARS,
    LOWER_CHARS,
    UPPER_CHARS,
    DIGITS_CHARS,
)


def classify(char: str) -> str | None:
    """Return the known character group holding ``char``, or None."""
    return next((group for group in CHARACTER_GROUPS if char in group), None)


def get_base(password: str) -> int:
    """Return the estimated size of the character set used by ``password``.

    Every known group that is touched contributes its full size; each
    distinct character outside the known groups contributes one.
    """
    groups_seen: set[str] = set()
    unknown = 0
    for char in set(password):
        group = classify(char)
        if group is None:
            unknown += 1
        else:
            groups_seen.add(group)
    return unknown + sum(len(group) for group in groups_seen)