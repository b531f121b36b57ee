""" Random password generation, also used to mint BLAKE3 keys. """

import secrets

from .exceptions import PasswordPolicyError


# look-alike characters (O, l, o, 0) are left out
UPPER = "ABCDEFGHIJKLMNPQRSTUVWXYZ"
LOWER = "abcdefghijkmnpqrstuvwxyz"
NUMBER = "123456789"
SYMBOL = "!@#$%^&*_"

MIN_LENGTH = 4

_rng = secrets.SystemRandom()


def generate_password(
    length: int = 16,
    upper: bool = True,
    lower: bool = True,
    number: bool = True,
    symbol: bool = True,
) -> str:
    """
    Return a random password of ``length`` characters.

    Every enabled character class contributes at least one character; the
    rest are drawn uniformly from the union of the enabled classes and the
    result is shuffled.
    """
    if length < MIN_LENGTH:
        raise PasswordPolicyError(f"Length must be at least {MIN_LENGTH}")

    classes = [
        chars
        for enabled, chars in ((upper, UPPER), (lower, LOWER), (number, NUMBER), (symbol, SYMBOL))
        if enabled
    ]
    if not classes:
        raise PasswordPolicyError("At least one character class must be enabled")

    char_set = "".join(classes)
    password = [secrets.choice(chars) for chars in classes]
    password.extend(secrets.choice(char_set) for _ in range(length - len(password)))
    _rng.shuffle(password)
    return "".join(password)
