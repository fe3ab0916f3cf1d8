"""Pool error classes.

Every workflow failure surfaces as one of these. All checks run before the
first ledger effect, so a raised PoolError never follows a partial mutation.
"""


class PoolError(Exception):
    """Base error for pool operations."""

    pass


class PoolLocked(PoolError):
    """Deposit or withdraw attempted while the pool is locked."""

    pass


class InvalidAmount(PoolError):
    """Zero share amount, or a double-zero minimum bound on withdraw."""

    pass


class SlippageExceeded(PoolError):
    """Curve-computed amount falls outside the caller's tolerance."""

    pass


class InsufficientSupplyError(PoolError):
    """Withdraw against a share supply that cannot cover the request."""

    pass


class CurveArithmeticError(PoolError, ArithmeticError):
    """Overflow or division by zero inside the curve math."""

    pass


class InvalidPoolAssets(PoolError):
    """The two pooled assets must be distinct."""

    pass


class PoolAlreadyExists(PoolError):
    """A pool with the same seed is already registered."""

    pass


class PoolNotFound(PoolError):
    """No pool is registered under the requested seed."""

    pass
