"""Digit counting and zero padding for season and episode numbers."""


def digit_count(number: int) -> int:
    """Count the base-10 digits of a non-negative number (0 has one digit)."""
    if number < 0:
        raise ValueError(f"expected a non-negative number, got {number}")
    digits = 1
    while number >= 10:
        number //= 10
        digits += 1
    return digits


def to_padded_string(number: int, pad: str, width: int) -> str:
    """
    Convert a number to a string of at least `width` characters, left-padded with `pad`.

    Padding is a minimum, numbers wider than `width` are returned unchanged:
      to_padded_string(5, "0", 2) -> "05"
      to_padded_string(100, "0", 2) -> "100"
    """
    digits = digit_count(number)
    if digits < width:
        return pad * (width - digits) + str(number)
    return str(number)
