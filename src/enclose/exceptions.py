class IntervalDivisionByZero(ZeroDivisionError):
    """Raised when the divisor interval contains zero."""

    def __init__(self, message: str = "interval division by zero"):
        super().__init__(message)


class PowerIsNotInteger(ValueError):
    """Raised when an interval exponent or root degree is not a singleton."""

    def __init__(self, message: str = "power is not an integer"):
        super().__init__(message)
