# carpool/errors.py


class CarpoolError(Exception):
    """Base class for every error raised by carpool."""


class DomainError(CarpoolError, ValueError):
    """Degenerate numeric input (zero gcd argument, empty lcm range)."""


class InvariantViolation(CarpoolError, AssertionError):
    """A ledger that should net to zero did not; points at a malformed ride upstream."""


class MalformedInputError(CarpoolError, ValueError):
    def __init__(self, msg: str, *, line: int | None = None):
        self.line = line
        super().__init__(f"line {line}: {msg}" if line is not None else msg)
