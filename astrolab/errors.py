"""Exceptions raised by the numerical routines."""


class NumericalError(ArithmeticError):
    """A numerical routine met input it cannot work with."""