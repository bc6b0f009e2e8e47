"""Pure arithmetic functions backing the calculator routes."""
from collections.abc import Callable
from typing import Dict


# Type alias for operation functions (taking two ints, returning an int)
OperationFn = Callable[[int, int], int]


def add(a: int, b: int) -> int:
    """
    Return the sum of two integers.

    :param int a: First operand
    :param int b: Second operand

    :return: a + b
    :rtype: int
    """
    return a + b


def subtract(a: int, b: int) -> int:
    """
    Return the difference of two integers.

    :param int a: Operand to subtract from
    :param int b: Operand to subtract

    :return: a - b
    :rtype: int
    """
    return a - b


# Mapping of route name to operation function, mounted as GET /<name>
OPERATIONS: Dict[str, OperationFn] = {
    "add": add,
    "subtract": subtract,
}
