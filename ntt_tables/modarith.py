"""
Modular arithmetic for NTT table generation

power() and inverse() are the only primitives the table builders need:
square-and-multiply exponentiation and an extended-Euclid inverse.
"""


def power(x, k, q):
    """
    Compute x^k mod q by binary exponentiation (square-and-multiply)

    Args:
        x: Base
        k: Exponent, k >= 0
        q: Modulus, q > 0

    Returns:
        x^k mod q in [0, q)
    """
    if q <= 0:
        raise ValueError(f"Modulus must be positive, got {q}")
    if k < 0:
        raise ValueError(f"Exponent must be non-negative, got {k}")

    result = 1 % q
    x = x % q
    while k > 0:
        if k & 1:
            result = (result * x) % q
        k >>= 1
        x = (x * x) % q
    return result


def extended_gcd(a, b):
    """Extended Euclidean Algorithm - returns gcd, u, v where a*u + b*v = gcd(a, b)"""
    # invariant: r1 = a * u1 + b * v1
    #            r2 = a * u2 + b * v2
    r1, u1, v1 = a, 1, 0
    r2, u2, v2 = b, 0, 1
    while r2 > 0:
        assert r1 == a * u1 + b * v1
        assert r2 == a * u2 + b * v2
        g = r1 // r2
        r1, r2 = r2, r1 - g * r2
        u1, u2 = u2, u1 - g * u2
        v1, v2 = v2, v1 - g * v2
    return r1, u1, v1


def inverse(n, q):
    """
    Compute the multiplicative inverse of n modulo q

    Returns:
        u in [0, q) with n*u = 1 (mod q), or None if gcd(n, q) != 1
    """
    if q <= 0:
        raise ValueError(f"Modulus must be positive, got {q}")
    if q == 1:
        # every residue mod 1 is 0
        return 0

    g, u, _ = extended_gcd(n % q, q)
    if g != 1:
        return None

    # The Bezout coefficient may be negative
    u %= q
    assert (n * u) % q == 1, f"inverse check failed: {n} * {u} mod {q}"
    return u
