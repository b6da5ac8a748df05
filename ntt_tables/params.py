"""
Validate NTT parameters (q, n, psi)

For a negative-wrapped convolution (NWC) NTT of size n we need:
- psi^n = -1 (mod q)
- psi^i != 1 (mod q) for 0 < i < n

Together these mean psi has order exactly 2n, so phi = psi^2 is a
primitive n-th root of unity modulo q.
"""

import logging
from typing import NamedTuple, Optional

from .errors import (
    ModulusOutOfRange,
    NotAnNthRootOfMinusOne,
    NotPowerOfTwo,
    NotPrimitive,
    ParameterError,
    RootNotInvertible,
    RootOutOfRange,
    SizeNotInvertible,
    SizeOutOfRange,
)
from .modarith import inverse, power

logger = logging.getLogger(__name__)

# Tables are emitted as 16-bit values
MAX_MODULUS = 0xFFFF
MAX_SIZE = 100000


class NttParameters(NamedTuple):
    q: int
    n: int
    psi: int
    phi: int
    inv_psi: int
    inv_n: int


def is_power_of_two(n):
    return n > 0 and (n & (n - 1)) == 0


def check_modulus_and_size(q, n):
    if q <= 1:
        raise ModulusOutOfRange(f"Invalid modulus {q}: must be at least 2")
    if q >= MAX_MODULUS:
        raise ModulusOutOfRange(f"The modulus is too large: max = {MAX_MODULUS}")
    if n <= 1:
        raise SizeOutOfRange(f"Invalid size {n}: must be at least 2")
    if n >= MAX_SIZE:
        raise SizeOutOfRange(f"The size is too large: max = {MAX_SIZE}")


def check_ranges(q, n, psi):
    """Reject q, n or psi outside the range the generated C tables support"""
    check_modulus_and_size(q, n)
    if psi <= 1 or psi >= q:
        raise RootOutOfRange(f"psi must be between 2 and {q - 1}")


def check_power_of_two(n):
    if not is_power_of_two(n):
        raise NotPowerOfTwo(f"invalid size: {n} is not a power of two")


def validate_parameters(q, n, psi) -> NttParameters:
    """
    Check that psi defines a valid NWC NTT of size n modulo q

    Args:
        q: Modulus
        n: NTT size
        psi: Candidate primitive 2n-th root of unity

    Returns:
        NttParameters with phi = psi^2, psi^(-1) and n^(-1)

    Raises:
        ParameterError: one of its subclasses, naming the failed check
    """
    check_ranges(q, n, psi)
    phi = (psi * psi) % q

    psi_n = power(psi, n, q)
    if psi_n != q - 1:
        raise NotAnNthRootOfMinusOne(
            f"invalid psi: {psi} is not an n-th root of -1  ({psi}^n = {psi_n})"
        )
    assert power(phi, n, q) == 1

    # Walk psi^i for 0 < i < n instead of one power() call per i
    x = psi
    for i in range(1, n):
        if x == 1:
            raise NotPrimitive(
                f"invalid psi: psi^2 is not a primitive n-th root of unity "
                f"(psi^2 = {phi}, psi^{i} = 1)"
            )
        x = (x * psi) % q

    inv_n = inverse(n, q)
    if inv_n is None:
        raise SizeNotInvertible(
            f"invalid parameters: {n} is not invertible modulo {q}"
        )
    inv_psi = inverse(psi, q)
    if inv_psi is None:
        raise RootNotInvertible(f"invalid psi: it's not invertible modulo {q}")

    logger.debug("validated q=%d n=%d psi=%d", q, n, psi)
    return NttParameters(q, n, psi, phi, inv_psi, inv_n)


def find_psi(q, n, start=2) -> Optional[int]:
    """
    Find the smallest psi >= start accepted by validate_parameters()

    Returns:
        psi if found, None otherwise
    """
    check_modulus_and_size(q, n)
    for psi in range(max(start, 2), q):
        # Cheap filter before the O(n) primitivity walk
        if power(psi, n, q) != q - 1:
            continue
        try:
            validate_parameters(q, n, psi)
        except ParameterError as exc:
            logger.debug("rejected psi=%d: %s", psi, exc)
            continue
        return psi
    return None
