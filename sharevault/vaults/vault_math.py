"""
Share/asset conversion with explicit rounding.

Every entry point picks the direction that makes the caller absorb the
precision loss:

    deposit   assets -> shares   DOWN
    mint      shares -> assets   UP
    withdraw  assets -> shares   UP
    redeem    shares -> assets   DOWN

An empty supply converts 1:1 (bootstrap).
"""

from enum import Enum

from sharevault.constants import MAX_UINT256


class Rounding(Enum):
    DOWN = "down"
    UP = "up"


def mul_div(x, y, denominator, rounding):
    if denominator == 0:
        raise ZeroDivisionError("mul_div by zero")
    if rounding is Rounding.UP:
        return (x * y + denominator - 1) // denominator
    return x * y // denominator


def to_shares(assets, total_assets, total_supply, rounding):
    if total_supply == 0:
        return assets
    if total_assets == 0:
        # outstanding shares with nothing behind them: no amount of shares
        # buys assets back, and new assets buy nothing
        return MAX_UINT256 if rounding is Rounding.UP and assets > 0 else 0
    return mul_div(assets, total_supply, total_assets, rounding)


def to_assets(shares, total_assets, total_supply, rounding):
    if total_supply == 0:
        return shares
    return mul_div(shares, total_assets, total_supply, rounding)
