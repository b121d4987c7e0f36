from sharevault.constants import HUNDRED_PERCENT, ZERO_ADDRESS
from sharevault.contract import external, uint256
from sharevault.errors import ZeroAmount
from sharevault.events import Transfer
from sharevault.mock.mock_erc20 import MockErc20


class MockFeeToken(MockErc20):
    """Skims `feeBps` of every transfer; the fee is burned."""

    def __init__(self, env, governance, name, symbol, decimals, initialSupply, feeBps, label=None):
        super().__init__(env, governance, name, symbol, decimals, initialSupply, label=label)
        self.storage.feeBps = self._check_bps(feeBps)

    def feeBps(self):
        return self.storage.feeBps

    @external
    def setFeeBps(self, feeBps, sender):
        self._only_governance(sender)
        self.storage.feeBps = self._check_bps(feeBps)

    def _transfer(self, sender, recipient, amount):
        self._check_recipient(recipient)
        if amount == 0:
            raise ZeroAmount("cannot transfer 0 amount")
        fee = amount * self.storage.feeBps // HUNDRED_PERCENT
        self._debit(sender, amount, "insufficient funds")
        self._credit(recipient, amount - fee)
        self.storage.totalSupply -= fee
        self._emit(Transfer(sender, recipient, amount - fee))
        if fee:
            self._emit(Transfer(sender, ZERO_ADDRESS, fee))

    @staticmethod
    def _check_bps(bps):
        if uint256(bps, "bps") > HUNDRED_PERCENT:
            raise ValueError(f"invalid bps: {bps}")
        return bps
