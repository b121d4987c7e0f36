"""
Share-based custodial vault ledger.

Depositors hand a single fungible asset to a vault and receive shares; shares
redeem for a proportional claim on whatever the vault (and its optional
strategy) currently holds.
"""
from sharevault.env import Env
from sharevault.errors import (
    VaultError,
    ZeroAmount,
    InsufficientBalance,
    InsufficientAllowance,
    Paused,
    InsufficientIdleLiquidity,
    InsufficientStrategyLiquidity,
    TransferAmountMismatch,
    Unauthorized,
    ReentrantCall,
    InvalidRecipient,
)
from sharevault.modules.access import AccessPolicy, PAUSER, STRATEGIST
from sharevault.vaults.erc4626 import Erc4626Vault
from sharevault.vaults.strategy_vault import StrategyVault
from sharevault.strategies.simple import SimpleStrategy

__all__ = [
    "Env",
    "VaultError",
    "ZeroAmount",
    "InsufficientBalance",
    "InsufficientAllowance",
    "Paused",
    "InsufficientIdleLiquidity",
    "InsufficientStrategyLiquidity",
    "TransferAmountMismatch",
    "Unauthorized",
    "ReentrantCall",
    "InvalidRecipient",
    "AccessPolicy",
    "PAUSER",
    "STRATEGIST",
    "Erc4626Vault",
    "StrategyVault",
    "SimpleStrategy",
]
