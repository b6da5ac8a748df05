"""Reference NTT implementations for tests."""

from .table_ntt import bit_reverse_order, negacyclic_convolution, schoolbook_negacyclic, shoup_ntt

__all__ = [
    "bit_reverse_order",
    "negacyclic_convolution",
    "schoolbook_negacyclic",
    "shoup_ntt",
]
