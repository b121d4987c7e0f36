from sharevault.mock.mock_erc20 import MockErc20


class MockReentrantToken(MockErc20):
    """
    Hands control to an arbitrary callable in the middle of a transfer, after
    balances have moved. The hook fires once, then disarms.

    The hook is wiring, not storage: it is not rolled back with the ledger.
    """

    def __init__(self, env, governance, name, symbol, decimals, initialSupply, label=None):
        super().__init__(env, governance, name, symbol, decimals, initialSupply, label=label)
        self._hook = None

    def setHook(self, hook):
        self._hook = hook

    def isArmed(self):
        return self._hook is not None

    def _transfer(self, sender, recipient, amount):
        super()._transfer(sender, recipient, amount)
        hook, self._hook = self._hook, None
        if hook is not None:
            hook(sender, recipient, amount)
