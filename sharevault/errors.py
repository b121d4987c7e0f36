"""
Failure kinds raised by the ledger.

Every failure aborts the whole top-level call (see `Env.call`), so callers
only ever need to tell the kinds apart, never to clean up after them.
"""


class VaultError(Exception):
    """Base class for every ledger failure. `reason` is the revert string."""

    default_reason = "vault error"

    def __init__(self, reason=None):
        self.reason = reason or self.default_reason
        super().__init__(self.reason)


class ZeroAmount(VaultError):
    default_reason = "zero amount"


class InsufficientBalance(VaultError):
    default_reason = "insufficient funds"


class InsufficientAllowance(VaultError):
    default_reason = "insufficient allowance"


class Paused(VaultError):
    default_reason = "paused"


class InsufficientIdleLiquidity(VaultError):
    default_reason = "insufficient idle assets"


class InsufficientStrategyLiquidity(VaultError):
    default_reason = "insufficient strategy liquidity"


class TransferAmountMismatch(VaultError):
    default_reason = "transfer amount mismatch"


class Unauthorized(VaultError):
    default_reason = "no perms"


class ReentrantCall(VaultError):
    default_reason = "reentrant call"


class InvalidRecipient(VaultError):
    default_reason = "invalid recipient"
