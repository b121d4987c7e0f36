from sharevault.constants import ZERO_ADDRESS
from sharevault.contract import Contract, external, to_address, uint256
from sharevault.errors import InsufficientStrategyLiquidity, Unauthorized, ZeroAmount
from sharevault.events import StrategyGain, StrategyLoss, StrategyVaultSet


class SimpleStrategy(Contract):
    """
    Honest strategy: holds whatever the vault sends it and reports that,
    plus any simulated gains, minus any simulated losses.

    The vault is wired exactly once, by the deployer, after construction.
    """

    def __init__(self, env, asset, deployer, label="simple_strategy"):
        super().__init__(env, label)
        self._asset = asset
        self._deployer = to_address(deployer)
        self.storage.vault = ZERO_ADDRESS
        self.storage.managedAssets = 0

    def asset(self):
        return self._asset.address

    def vault(self):
        return self.storage.vault

    def deployer(self):
        return self._deployer

    def totalAssets(self):
        return self.storage.managedAssets

    @external
    def setVault(self, vault, sender):
        if sender != self._deployer:
            raise Unauthorized("no perms")
        if self.storage.vault != ZERO_ADDRESS:
            raise Unauthorized("vault already set")
        vault = to_address(vault)
        if vault == ZERO_ADDRESS:
            raise ValueError("invalid vault")
        self.storage.vault = vault
        self._emit(StrategyVaultSet(vault))

    @external
    def deposit(self, assets, sender):
        self._only_vault(sender)
        self.storage.managedAssets += uint256(assets)

    @external
    def withdraw(self, assets, sender):
        self._only_vault(sender)
        assets = uint256(assets)
        if assets > self.storage.managedAssets:
            raise InsufficientStrategyLiquidity("insufficient strategy liquidity")
        if assets > self._asset.balanceOf(self.address):
            raise InsufficientStrategyLiquidity("strategy holdings short")

        self.storage.managedAssets -= assets
        delivered = self._delivered(assets)
        if delivered:
            self._asset.transfer(self.storage.vault, delivered, sender=self.address)

    # yield events

    @external
    def simulateGain(self, assets, sender):
        self._only_deployer(sender)
        if uint256(assets) == 0:
            raise ZeroAmount("cannot gain 0 amount")
        self.storage.managedAssets += assets
        self._emit(StrategyGain(assets))

    @external
    def simulateLoss(self, assets, sender):
        self._only_deployer(sender)
        if uint256(assets) == 0:
            raise ZeroAmount("cannot lose 0 amount")
        if assets > self.storage.managedAssets:
            raise InsufficientStrategyLiquidity("loss exceeds managed assets")
        self.storage.managedAssets -= assets
        self._emit(StrategyLoss(assets))

    # internal

    def _delivered(self, assets):
        return assets

    def _only_vault(self, sender):
        if self.storage.vault == ZERO_ADDRESS or sender != self.storage.vault:
            raise Unauthorized("only vault")

    def _only_deployer(self, sender):
        if sender != self._deployer:
            raise Unauthorized("no perms")
