import secrets
import string

DISCOUNT_CODE_PREFIX = "DISCOUNT-"
SHORT_CODE_LENGTH = 8
_ALPHABET = string.ascii_letters + string.digits


def generate_short_code(length: int = SHORT_CODE_LENGTH) -> str:
    return "".join(secrets.choice(_ALPHABET) for _ in range(length))


def generate_discount_code() -> str:
    return f"{DISCOUNT_CODE_PREFIX}{generate_short_code()}"
