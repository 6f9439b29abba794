# flightpath/domain/errors.py


class FlightPathError(Exception):
    """Base class for everything the trajectory engine raises."""


class InvalidInputError(FlightPathError, ValueError):
    """Bad argument at construction or call time (types, ranges, negative time)."""


class NonNumericComponentError(InvalidInputError, TypeError):
    pass


class NonFiniteComponentError(InvalidInputError):
    pass


class SingularOperationError(FlightPathError, ArithmeticError):
    """Operation undefined for this particular operand."""


class DivisionByZeroError(SingularOperationError, ZeroDivisionError):
    pass


class ZeroVectorError(SingularOperationError):
    pass


class OutOfDomainError(FlightPathError, ValueError):
    """Interpolated query outside [0, t_max]."""
