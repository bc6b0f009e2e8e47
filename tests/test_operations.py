"""Test the pure arithmetic functions add and subtract."""
import pytest

from calculator_api.common.operations import OPERATIONS, add, subtract


@pytest.mark.parametrize("a,b,expected", [
    (1, 1, 2),
    (-2, -2, -4),
    (7, -3, 4),
    (0, 5, 5),
    (10**20, 1, 10**20 + 1),
])
def test_add(a: int, b: int, expected: int) -> None:
    """add returns the arithmetic sum."""
    assert add(a, b) == expected


@pytest.mark.parametrize("a,b,expected", [
    (5, 4, 1),
    (4, 5, -1),
    (-3, -3, 0),
    (2, -8, 10),
])
def test_subtract(a: int, b: int, expected: int) -> None:
    """subtract returns a - b."""
    assert subtract(a, b) == expected


def test_functions_are_deterministic() -> None:
    """Identical inputs always produce identical outputs."""
    assert [add(3, 4) for _ in range(5)] == [7] * 5
    assert [subtract(3, 4) for _ in range(5)] == [-1] * 5


def test_operations_registry() -> None:
    """OPERATIONS exposes exactly the add and subtract routes."""
    assert OPERATIONS == {"add": add, "subtract": subtract}
