"""
Twiddle factor tables for NWC NTT

Power tables (x * b^i mod q):
    psi_powers_ntt[i]            = psi^i
    inv_psi_powers_ntt[i]        = psi^(-i)
    scaled_inv_psi_powers_ntt[i] = psi^(-i) * n^(-1)

Shoup table for an iterative radix-2 Cooley-Tukey NTT:
    w[t + j] = (phi^(n/2t))^j  for t = 1, 2, 4, ..., n/2 and j = 0 .. t-1
"""

import logging

import numpy as np

from .modarith import power
from .params import check_power_of_two

logger = logging.getLogger(__name__)

PSI_POWERS = "psi_powers_ntt"
INV_PSI_POWERS = "inv_psi_powers_ntt"
SCALED_INV_PSI_POWERS = "scaled_inv_psi_powers_ntt"
SHOUP = "shoup_ntt"


def power_table(n, q, x, b):
    """Table a[i] = (x * b^i) mod q for i = 0 to n-1"""
    table = np.zeros(n, dtype=np.int64)
    x = x % q
    for i in range(n):
        table[i] = x
        x = (x * b) % q
    return table


def psi_power_table(n, q, psi):
    return power_table(n, q, 1, psi)


def inv_psi_power_table(n, q, inv_psi):
    return power_table(n, q, 1, inv_psi)


def scaled_inv_psi_power_table(n, q, inv_psi, inv_n):
    # Folds the final 1/n scaling of the inverse NTT into the twiddles
    return power_table(n, q, inv_n, inv_psi)


def psi_power_tables(params):
    """
    Build the three power tables for validated parameters

    Args:
        params: NttParameters from validate_parameters()

    Returns:
        dict of table name prefix -> table, in emission order
    """
    n, q = params.n, params.q
    return {
        PSI_POWERS: psi_power_table(n, q, params.psi),
        INV_PSI_POWERS: inv_psi_power_table(n, q, params.inv_psi),
        SCALED_INV_PSI_POWERS: scaled_inv_psi_power_table(
            n, q, params.inv_psi, params.inv_n
        ),
    }


def build_shoup_table(n, q, phi):
    """
    Build the Shoup-style table for n, q, phi

    Stage t (block half-size t = 1, 2, 4, ..., n/2) reads its twiddles
    contiguously from table[t .. 2t-1]: powers of y = phi^(n/2t), a
    primitive 2t-th root of unity when phi is a primitive n-th root.
    table[0] is not used.

    Args:
        n: NTT size (power of two)
        q: Modulus
        phi: Primitive n-th root of unity mod q

    Returns:
        numpy array of n entries
    """
    check_power_of_two(n)

    table = np.zeros(n, dtype=np.int64)
    i = 1
    t = 1
    while t < n:
        x = 1
        y = power(phi, n // (2 * t), q)
        for j in range(t):
            assert i == t + j
            assert i < n
            table[i] = x
            i += 1
            x = (x * y) % q
        t <<= 1

    # Every index 1 .. n-1 written exactly once
    assert i == n
    logger.debug("built shoup table n=%d q=%d phi=%d", n, q, phi)
    return table
