"""Bit and memory-size helpers."""


def bit(x: int) -> int:
    """Return an integer with only bit *x* set."""
    return 1 << x


def kb(x: int) -> int:
    """Return *x* kibibytes in bytes."""
    return 1024 * x


def mb(x: int) -> int:
    """Return *x* mebibytes in bytes."""
    return 1024 * kb(x)


def gb(x: int) -> int:
    """Return *x* gibibytes in bytes."""
    return 1024 * mb(x)