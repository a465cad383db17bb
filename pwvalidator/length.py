"""Effective password length after discounting repeats and keyboard runs."""

SEQ_NUMS = "0123456789"
SEQ_KEYBOARD0 = "qwertyuiop"
SEQ_KEYBOARD1 = "asdfghjkl"
SEQ_KEYBOARD2 = "zxcvbnm"
SEQ_ALPHABET = "abcdefghijklmnopqrstuvwxyz"

_SEQUENCES = (SEQ_NUMS, SEQ_KEYBOARD0, SEQ_KEYBOARD1, SEQ_KEYBOARD2, SEQ_ALPHABET)


def remove_more_than_two_from_sequence(s: str, seq: str) -> str:
    """Drop characters of ``s`` that continue a run from ``seq`` past two."""
    chars = list(s)
    matches = 0
    i = 0
    while i < len(chars):
        for expected in seq:
            if i >= len(chars):
                break
            if chars[i] != expected:
                matches = 0
                continue
            matches += 1
            if matches > 2:
                del chars[i]
            else:
                i += 1
        i += 1
    return "".join(chars)


def get_reversed_string(s: str) -> str:
    """Return ``s`` with its characters in reverse order."""
    return s[::-1]


def remove_more_than_two_repeating_chars(s: str) -> str:
    """Collapse runs of identical characters to at most two."""
    kept = []
    prev_prev = prev = "\x00"
    for char in s:
        if not char == prev == prev_prev:
            kept.append(char)
        prev_prev, prev = prev, char
    return "".join(kept)


def get_length(password: str) -> int:
    """Return the UTF-8 byte length of ``password`` after shortening.

    Runs of more than two identical characters, and runs of more than two
    characters from a keyboard or alphabet sequence (either direction),
    are cut down before measuring.
    """
    password = remove_more_than_two_repeating_chars(password)
    for seq in _SEQUENCES:
        password = remove_more_than_two_from_sequence(password, seq)
    for seq in _SEQUENCES:
        password = remove_more_than_two_from_sequence(
            password, get_reversed_string(seq)
        )
    return len(password.encode("utf-8", errors="surrogatepass"))