"""Events emitted by ledger contracts. Field names follow the on-chain ABI."""

from dataclasses import dataclass


# erc20


@dataclass(frozen=True)
class Transfer:
    sender: str
    recipient: str
    amount: int


@dataclass(frozen=True)
class Approval:
    owner: str
    spender: str
    amount: int


# erc4626


@dataclass(frozen=True)
class Deposit:
    sender: str
    owner: str
    assets: int
    shares: int


@dataclass(frozen=True)
class Withdraw:
    sender: str
    receiver: str
    owner: str
    assets: int
    shares: int


@dataclass(frozen=True)
class PauseToggled:
    isPaused: bool
    caller: str


# access


@dataclass(frozen=True)
class RoleGranted:
    role: str
    account: str
    caller: str


@dataclass(frozen=True)
class RoleRevoked:
    role: str
    account: str
    caller: str


@dataclass(frozen=True)
class RoleOpenSet:
    role: str
    isOpen: bool
    caller: str


# strategy


@dataclass(frozen=True)
class StrategyDeployed:
    strategy: str
    assets: int
    caller: str


@dataclass(frozen=True)
class StrategyWithdrawn:
    strategy: str
    assets: int
    caller: str


@dataclass(frozen=True)
class StrategyShortfallWithdrawn:
    strategy: str
    shortfall: int
    receiver: str


@dataclass(frozen=True)
class StrategyVaultSet:
    vault: str


@dataclass(frozen=True)
class StrategyGain:
    assets: int


@dataclass(frozen=True)
class StrategyLoss:
    assets: int
