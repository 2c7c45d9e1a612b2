"""
Unit Tests for Currying
"""

import pytest

from closures import InvalidArgumentError, curried, curry


def volume(length, width, height):
    return length * width * height


def test_curry_fixes_leading_arguments():
    """Test curry behaves like functools.partial"""
    scaled = curry(volume, 2, 3)
    assert scaled(4) == 24
    assert curry(volume, height=5)(1, 2) == 10


def test_curry_undefined_function():
    """Test curry rejects a missing function"""
    with pytest.raises(InvalidArgumentError):
        curry(None, 1)


def test_curried_chains():
    """Test arguments may be given one or more at a time"""
    cube = curried(volume)
    assert cube(2)(3)(4) == 24
    assert cube(2, 3)(4) == 24
    assert cube(2)(3, 4) == 24
    assert cube(2, 3, 4) == 24


def test_curried_steps_are_independent():
    """Test intermediate closures do not share collected arguments"""
    first = curried(volume)(2)
    by_three = first(3)
    by_five = first(5)
    assert by_three(1) == 6
    assert by_five(1) == 10
    assert by_three(1) == 6


def test_curried_ignores_defaults():
    """Test the default arity counts required positional parameters only"""

    def scale(value, factor, offset=0):
        return value * factor + offset

    assert curried(scale)(2)(3) == 6
    assert curried(scale, 3)(2)(3)(1) == 7


def test_curried_zero_arity():
    """Test zero arity calls through immediately"""
    assert curried(lambda: 42)() == 42


def test_curried_invalid_arity():
    """Test negative arity is rejected"""
    with pytest.raises(InvalidArgumentError):
        curried(volume, -1)
    with pytest.raises(InvalidArgumentError):
        curried(None)


def test_curried_unknown_arity():
    """Test a builtin without a signature needs an explicit arity"""
    with pytest.raises(InvalidArgumentError) as info:
        curried(max)
    assert info.value.argument == "arity"

    assert curried(max, 2)(3)(5) == 5
