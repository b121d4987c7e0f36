from sharevault.constants import HUNDRED_PERCENT
from sharevault.contract import external, uint256
from sharevault.errors import ZeroAmount
from sharevault.events import Transfer
from sharevault.mock.mock_erc20 import MockErc20


class MockFalseSuccessToken(MockErc20):
    """
    Reports success on every transfer but only moves `deliverBps` of the
    amount. Starts honest (full delivery) until governance lowers it.
    """

    def __init__(self, env, governance, name, symbol, decimals, initialSupply, label=None):
        super().__init__(env, governance, name, symbol, decimals, initialSupply, label=label)
        self.storage.deliverBps = HUNDRED_PERCENT

    def deliverBps(self):
        return self.storage.deliverBps

    @external
    def setDeliverBps(self, deliverBps, sender):
        self._only_governance(sender)
        if uint256(deliverBps, "bps") > HUNDRED_PERCENT:
            raise ValueError(f"invalid bps: {deliverBps}")
        self.storage.deliverBps = deliverBps

    def _transfer(self, sender, recipient, amount):
        self._check_recipient(recipient)
        if amount == 0:
            raise ZeroAmount("cannot transfer 0 amount")
        moved = amount * self.storage.deliverBps // HUNDRED_PERCENT
        if moved:
            self._debit(sender, moved, "insufficient funds")
            self._credit(recipient, moved)
        # the event claims the full amount
        self._emit(Transfer(sender, recipient, amount))
