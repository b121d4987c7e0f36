from sharevault.constants import HUNDRED_PERCENT
from sharevault.contract import external, uint256
from sharevault.strategies.simple import SimpleStrategy


class MockLeakyStrategy(SimpleStrategy):
    """
    Books the full withdrawal against its total but only sends back
    `100% - leakBps` of it, while reporting success.
    """

    def __init__(self, env, asset, deployer, leakBps, label="leaky_strategy"):
        super().__init__(env, asset, deployer, label=label)
        self.storage.leakBps = self._check_bps(leakBps)

    def leakBps(self):
        return self.storage.leakBps

    @external
    def setLeakBps(self, leakBps, sender):
        self._only_deployer(sender)
        self.storage.leakBps = self._check_bps(leakBps)

    def _delivered(self, assets):
        return assets - assets * self.storage.leakBps // HUNDRED_PERCENT

    @staticmethod
    def _check_bps(bps):
        if uint256(bps, "bps") > HUNDRED_PERCENT:
            raise ValueError(f"invalid bps: {bps}")
        return bps
