# app/constants/error_codes.py

from enum import Enum


class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # cart
    CART_EMPTY = "CART_EMPTY"
    CART_ZERO_TOTAL = "CART_ZERO_TOTAL"

    # orders
    CHECKOUT_FAILED = "CHECKOUT_FAILED"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"
