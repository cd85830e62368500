# domain/arithmetic.py
import math
from functools import reduce

from carpool.errors import DomainError


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two nonzero integers, always positive."""
    if a == 0 or b == 0:
        raise DomainError(f"gcd is undefined for zero arguments: gcd({a}, {b})")
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    return a // gcd(a, b) * b


def range_lcm(a: int, b: int) -> int:
    """Least common multiple of every integer in [a, b]."""
    count = b - a + 1
    if count < 2:
        raise DomainError(f"range [{a}, {b}] holds fewer than 2 integers")
    return reduce(lcm, range(a, b + 1), 1)
