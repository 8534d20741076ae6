"""
Square roots modulo a prime

Point decompression needs y = sqrt(x^3 + b) mod p. Both WTLS primes are
congruent to 3 mod 4 and take the single exponentiation shortcut, the general
Tonelli-Shanks search is kept for any other odd prime.
"""

from typing import Optional, Tuple


def legendre_symbol(a: int, p: int) -> int:
    """
    Euler's criterion: a^((p-1)/2) mod p.

    Returns 0 if p divides a, 1 if a is a quadratic residue mod p and -1 otherwise.
    """
    if a % p == 0:
        return 0

    ls = pow(a, (p - 1) // 2, p)
    if ls == p - 1:
        return -1
    return 1


def _split_two_power(n: int) -> Tuple[int, int]:
    """Write n = s * 2^e with s odd, return (s, e)"""
    e = 0
    while n % 2 == 0:
        n //= 2
        e += 1
    return n, e


def _find_non_residue(p: int) -> int:
    n = 2
    while legendre_symbol(n, p) != -1:
        n += 1
    return n


def sqrt_mod(a: int, p: int) -> Optional[int]:
    """
    Compute some r with r^2 = a (mod p).

    Returns None if a has no square root mod p. A zero input is a legitimate
    root of itself and returns 0, it is never confused with the missing case.
    """
    a %= p
    if a == 0:
        return 0
    if p == 2:
        return a
    if legendre_symbol(a, p) != 1:
        return None
    if p % 4 == 3:
        return pow(a, (p + 1) // 4, p)

    # Tonelli-Shanks
    s, e = _split_two_power(p - 1)
    n = _find_non_residue(p)

    x = pow(a, (s + 1) // 2, p)
    b = pow(a, s, p)
    g = pow(n, s, p)
    r = e

    while True:
        # Smallest m with b^(2^m) = 1
        t = b
        m = 0
        while m < r:
            if t == 1:
                break
            t = (t * t) % p
            m += 1

        if m == 0:
            return x

        gs = pow(g, 1 << (r - m - 1), p)
        g = (gs * gs) % p
        x = (x * gs) % p
        b = (b * g) % p
        r = m
