"""Exact opcode-sequence comparison of method bodies."""

from methodmatch.core.model import Method, MethodBody


def matches_exactly(a: MethodBody | None, b: MethodBody | None) -> bool:
    """Compare the instructions of two bodies, ignoring operands.

    Args:
        a: First body, None if the method has no body.
        b: Second body, None if the method has no body.

    Returns:
        True if both bodies exist, have the same length and the same opcode
        at every position.
    """
    if a is None or b is None or len(a) != len(b):
        return False

    return all(x.opcode == y.opcode for x, y in zip(a, b))


def compare_exact(method_a: Method, method_b: Method) -> bool:
    """Exact comparison of two methods."""
    return matches_exactly(method_a.body, method_b.body)
