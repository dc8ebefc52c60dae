"""16.16 fixed-point arithmetic on 32-bit signed integers."""

INT32_MAX = 0x7FFFFFFF
INT32_MIN = -0x80000000
ONE = 65536

_MUL_LIMIT = 0x7FFFFFFF0000


def _wrap32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    return (value - INT32_MIN) % (1 << 32) + INT32_MIN


def _check32(value: int, operation: str) -> int:
    if value > INT32_MAX or value < INT32_MIN:
        raise OverflowError(f"fixed-point {operation} overflow")
    return value


def ftofix(x: float) -> int:
    """Convert a float to 16.16 fixed point, rounding half away from zero."""
    if x > 32767.0 or x < -32767.0:
        raise OverflowError(f"{x!r} is out of fixed-point range")
    return int(x * 65536.0 + (-0.5 if x < 0 else 0.5))


def fixtof(x: int) -> float:
    """Convert a 16.16 fixed-point value to a float."""
    return x / 65536.0


def fixadd(x: int, y: int) -> int:
    """Add two fixed-point values."""
    return _check32(x + y, "addition")


def fixsub(x: int, y: int) -> int:
    """Subtract one fixed-point value from another."""
    return _check32(x - y, "subtraction")


def fixmul(x: int, y: int) -> int:
    """Multiply two fixed-point values."""
    product = x * y
    if product > _MUL_LIMIT or product < -_MUL_LIMIT:
        raise OverflowError("fixed-point multiplication overflow")
    return product >> 16


def fixdiv(x: int, y: int) -> int:
    """Divide one fixed-point value by another."""
    if y == 0:
        raise ZeroDivisionError("fixed-point division by zero")
    return ftofix(fixtof(x) / fixtof(y))


def fixfloor(x: int) -> int:
    """Return the largest integer not greater than the fixed-point value."""
    return x >> 16


def fixceil(x: int) -> int:
    """Return the smallest integer not less than the fixed-point value."""
    if x > 0x7FFF0000:
        raise OverflowError("fixed-point ceiling overflow")
    return fixfloor(x + 0xFFFF)


def itofix(x: int) -> int:
    """Convert an integer to fixed point."""
    return _wrap32(x << 16)


def fixtoi(x: int) -> int:
    """Convert a fixed-point value to the nearest integer."""
    return fixfloor(x) + ((x & 0x8000) >> 15)