"""Precomputed twiddle factor tables for negative-wrapped NTT."""

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
from .emit import format_table, power_table_name, shoup_table_name, write_table
from .modarith import extended_gcd, inverse, power
from .params import NttParameters, check_ranges, find_psi, is_power_of_two, validate_parameters
from .tables import (
    build_shoup_table,
    inv_psi_power_table,
    power_table,
    psi_power_table,
    psi_power_tables,
    scaled_inv_psi_power_table,
)

__all__ = [
    "ModulusOutOfRange",
    "NotAnNthRootOfMinusOne",
    "NotPowerOfTwo",
    "NotPrimitive",
    "ParameterError",
    "RootNotInvertible",
    "RootOutOfRange",
    "SizeNotInvertible",
    "SizeOutOfRange",
    "NttParameters",
    "build_shoup_table",
    "check_ranges",
    "extended_gcd",
    "find_psi",
    "format_table",
    "inv_psi_power_table",
    "inverse",
    "is_power_of_two",
    "power",
    "power_table",
    "power_table_name",
    "psi_power_table",
    "psi_power_tables",
    "scaled_inv_psi_power_table",
    "shoup_table_name",
    "validate_parameters",
    "write_table",
]
