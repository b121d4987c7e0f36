from sharevault.contract import external, to_address, uint256
from sharevault.errors import Unauthorized
from sharevault.modules.erc20 import Erc20


class MockErc20(Erc20):
    """
    Plain asset. `initialSupply` is in whole tokens and goes to governance,
    which is also the only account allowed to mint more.
    """

    def __init__(self, env, governance, name, symbol, decimals, initialSupply, label=None):
        super().__init__(env, name, symbol, decimals, label=label)
        self._governance = to_address(governance)
        if initialSupply:
            self._mint(self._governance, initialSupply * 10 ** decimals)

    def governance(self):
        return self._governance

    @external
    def mint(self, recipient, amount, sender):
        self._only_governance(sender)
        recipient = to_address(recipient)
        self._check_recipient(recipient)
        self._mint(recipient, uint256(amount))
        return True

    def _only_governance(self, sender):
        if sender != self._governance:
            raise Unauthorized("no perms")
