"""Parameter errors reported by the table generators."""


class ParameterError(ValueError):
    """Base class for rejected (q, n, psi) inputs"""


class ModulusOutOfRange(ParameterError):
    pass


class SizeOutOfRange(ParameterError):
    pass


class RootOutOfRange(ParameterError):
    pass


class NotAnNthRootOfMinusOne(ParameterError):
    """psi^n mod q is not q - 1"""


class NotPrimitive(ParameterError):
    """psi^i = 1 for some 0 < i < n, so psi^2 is not a primitive n-th root of unity"""


class SizeNotInvertible(ParameterError):
    pass


class RootNotInvertible(ParameterError):
    pass


class NotPowerOfTwo(ParameterError):
    """The Shoup layout needs stage sizes 1, 2, 4, ..., n/2"""
