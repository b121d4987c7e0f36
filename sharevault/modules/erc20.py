from sharevault.constants import MAX_UINT256, ZERO_ADDRESS
from sharevault.contract import Contract, external, to_address, uint256
from sharevault.errors import InsufficientAllowance, InsufficientBalance, InvalidRecipient, ZeroAmount
from sharevault.events import Approval, Transfer


class Erc20(Contract):
    """
    Standard fungible ledger: supply, balances, allowances.

    Minting and burning are internal (`_mint` / `_burn`); only the contract
    that owns the ledger, or a subclass such as a vault, may reach them.
    """

    def __init__(self, env, name, symbol, decimals, label=None):
        super().__init__(env, label or symbol)
        self._name = name
        self._symbol = symbol
        self._decimals = decimals
        self.storage.totalSupply = 0
        self.storage.balances = {}
        self.storage.allowances = {}

    # metadata

    def name(self):
        return self._name

    def symbol(self):
        return self._symbol

    def decimals(self):
        return self._decimals

    # views

    def totalSupply(self):
        return self.storage.totalSupply

    def balanceOf(self, owner):
        return self.storage.balances.get(to_address(owner), 0)

    def allowance(self, owner, spender):
        return self.storage.allowances.get((to_address(owner), to_address(spender)), 0)

    # actions

    @external
    def transfer(self, recipient, amount, sender):
        self._transfer(sender, to_address(recipient), uint256(amount))
        return True

    @external
    def transferFrom(self, owner, recipient, amount, sender):
        owner = to_address(owner)
        amount = uint256(amount)
        self._spend_allowance(owner, sender, amount)
        self._transfer(owner, to_address(recipient), amount)
        return True

    @external
    def approve(self, spender, amount, sender):
        spender = to_address(spender)
        if spender == ZERO_ADDRESS:
            raise InvalidRecipient("invalid spender")
        self.storage.allowances[(sender, spender)] = uint256(amount)
        self._emit(Approval(sender, spender, amount))
        return True

    # internal

    def _check_recipient(self, recipient):
        if recipient in (ZERO_ADDRESS, self.address):
            raise InvalidRecipient("invalid recipient")

    def _transfer(self, sender, recipient, amount):
        self._check_recipient(recipient)
        if amount == 0:
            raise ZeroAmount("cannot transfer 0 amount")
        self._debit(sender, amount, "insufficient funds")
        self._credit(recipient, amount)
        self._emit(Transfer(sender, recipient, amount))

    def _spend_allowance(self, owner, spender, amount):
        current = self.allowance(owner, spender)
        if current == MAX_UINT256:
            return
        if current < amount:
            raise InsufficientAllowance("insufficient allowance")
        self.storage.allowances[(owner, spender)] = current - amount

    def _debit(self, owner, amount, reason):
        balance = self.storage.balances.get(owner, 0)
        if balance < amount:
            raise InsufficientBalance(reason)
        self.storage.balances[owner] = balance - amount

    def _credit(self, owner, amount):
        self.storage.balances[owner] = self.storage.balances.get(owner, 0) + amount

    def _mint(self, recipient, amount):
        self._credit(recipient, amount)
        self.storage.totalSupply += amount
        self._emit(Transfer(ZERO_ADDRESS, recipient, amount))

    def _burn(self, owner, amount, reason="insufficient funds"):
        self._debit(owner, amount, reason)
        self.storage.totalSupply -= amount
        self._emit(Transfer(owner, ZERO_ADDRESS, amount))
