"""
Vault that can park part of its pool in an external strategy.

The strategy's self-reported total is folded straight into `totalAssets()`,
so a strategy gain or loss moves the share price of every holder at once.
Nothing is tracked per holder and there is no separate loss-allocation step.

Assets only move between vault and strategy through `deployToStrategy`,
`withdrawFromStrategy`, and the shortfall pull that runs right before a
withdrawal pays out. None of these mint or burn shares.
"""

from sharevault.contract import external, to_address, uint256
from sharevault.errors import InsufficientIdleLiquidity, InsufficientStrategyLiquidity, ZeroAmount
from sharevault.events import StrategyDeployed, StrategyShortfallWithdrawn, StrategyWithdrawn
from sharevault.modules.access import STRATEGIST
from sharevault.modules.nonreentrant import nonreentrant
from sharevault.strategies.interface import Strategy
from sharevault.vaults.erc4626 import Erc4626Vault


class StrategyVault(Erc4626Vault):

    def __init__(self, env, asset, strategy: Strategy, name, symbol, access_policy, label=None):
        if to_address(strategy.asset()) != asset.address:
            raise ValueError("strategy asset mismatch")
        super().__init__(env, asset, name, symbol, access_policy, label=label)
        self._strategy = strategy

    def strategy(self):
        return self._strategy.address

    def idleAssets(self):
        return self._asset.balanceOf(self.address)

    def strategyAssets(self):
        return self._strategy.totalAssets()

    def totalAssets(self):
        return self.idleAssets() + self._strategy.totalAssets()

    ############
    # Strategy #
    ############

    @external
    @nonreentrant
    def deployToStrategy(self, assets, sender):
        if uint256(assets) == 0:
            raise ZeroAmount("cannot deploy 0 amount")
        self._access.check(STRATEGIST, sender)

        if assets > self.idleAssets():
            raise InsufficientIdleLiquidity("insufficient idle assets")

        self._transfer_out(self._strategy.address, assets)
        self._strategy.deposit(assets, sender=self.address)

        self._emit(StrategyDeployed(self._strategy.address, assets, sender))
        return assets

    @external
    @nonreentrant
    def withdrawFromStrategy(self, assets, sender):
        if uint256(assets) == 0:
            raise ZeroAmount("cannot withdraw 0 amount")
        self._access.check(STRATEGIST, sender)

        self._pull_from_strategy(assets)

        self._emit(StrategyWithdrawn(self._strategy.address, assets, sender))
        return assets

    ############
    # Internal #
    ############

    def _pull_from_strategy(self, assets):
        before = self.idleAssets()
        self._strategy.withdraw(assets, sender=self.address)
        if self.idleAssets() - before != assets:
            raise InsufficientStrategyLiquidity("strategy under-delivered")

    def _send_assets(self, receiver, assets):
        idle = self.idleAssets()
        if idle < assets:
            shortfall = assets - idle
            self._pull_from_strategy(shortfall)
            self._emit(StrategyShortfallWithdrawn(self._strategy.address, shortfall, receiver))
        super()._send_assets(receiver, assets)
