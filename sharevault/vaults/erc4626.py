"""
Share vault over a single asset.

The vault is its own share ledger (`Erc20`). Pool size is never stored: it is
re-read from the asset balance on every call, so donations raise the value of
every share without minting any.

Two rules hold for every entry point:

* measure, don't trust: the amount that actually moved is the vault's own
  balance delta around the asset call, never the amount the call was asked
  to move;
* shares are minted/burned before any asset leaves the vault, so whatever
  runs during the transfer already sees the updated ledger.
"""

from sharevault.constants import MAX_UINT256
from sharevault.contract import external, to_address, uint256
from sharevault.errors import InsufficientBalance, Paused, TransferAmountMismatch, ZeroAmount
from sharevault.events import Deposit, PauseToggled, Withdraw
from sharevault.modules.access import PAUSER
from sharevault.modules.erc20 import Erc20
from sharevault.modules.nonreentrant import nonreentrant
from sharevault.vaults.vault_math import Rounding, to_assets, to_shares


class Erc4626Vault(Erc20):

    def __init__(self, env, asset, name, symbol, access_policy, label=None):
        super().__init__(env, name, symbol, asset.decimals(), label=label)
        self._asset = asset
        self._access = access_policy
        self._entered = False
        self.storage.isPaused = False

    def asset(self):
        return self._asset.address

    def accessPolicy(self):
        return self._access.address

    def isPaused(self):
        return self.storage.isPaused

    ################
    # Pool / Ratio #
    ################

    def totalAssets(self):
        return self._asset.balanceOf(self.address)

    def convertToShares(self, assets):
        return to_shares(uint256(assets), self.totalAssets(), self.totalSupply(), Rounding.DOWN)

    def convertToAssets(self, shares):
        shares = uint256(shares)
        total_supply = self.totalSupply()
        if total_supply == 0:
            return 0
        return to_assets(shares, self.totalAssets(), total_supply, Rounding.DOWN)

    def pricePerShare(self):
        one = 10 ** self.decimals()
        if self.totalSupply() == 0:
            return one
        return self.convertToAssets(one)

    ############
    # Previews #
    ############

    def previewDeposit(self, assets):
        return self.convertToShares(assets)

    def previewMint(self, shares):
        return to_assets(uint256(shares), self.totalAssets(), self.totalSupply(), Rounding.UP)

    def previewWithdraw(self, assets):
        assets = uint256(assets)
        if self.totalSupply() == 0:
            # nothing outstanding to burn
            return 0
        return to_shares(assets, self.totalAssets(), self.totalSupply(), Rounding.UP)

    def previewRedeem(self, shares):
        return self.convertToAssets(shares)

    ############
    # Capacity #
    ############

    def maxDeposit(self, receiver):
        return 0 if self.storage.isPaused else MAX_UINT256

    def maxMint(self, receiver):
        return 0 if self.storage.isPaused else MAX_UINT256

    def maxWithdraw(self, owner):
        shares = self.balanceOf(owner)
        assets = self.convertToAssets(shares)
        # floor(b * T / S) never costs more than b shares at ceil rounding;
        # the loop only enforces that bound
        while assets > 0 and self.previewWithdraw(assets) > shares:
            assets -= 1
        return assets

    def maxRedeem(self, owner):
        return self.balanceOf(owner)

    ###########
    # Deposit #
    ###########

    @external
    @nonreentrant
    def deposit(self, assets, receiver, sender):
        if uint256(assets) == 0:
            raise ZeroAmount("cannot deposit 0 amount")
        receiver = to_address(receiver)
        self._check_not_paused()
        self._check_recipient(receiver)

        # priced against the pool as it was before the pull
        total_assets = self.totalAssets()
        total_supply = self.totalSupply()

        received = self._pull_assets(sender, assets)
        if received == 0:
            raise ZeroAmount("cannot deposit 0 amount")

        shares = to_shares(received, total_assets, total_supply, Rounding.DOWN)
        if shares == 0:
            raise ZeroAmount("cannot mint 0 shares")

        self._mint(receiver, shares)
        self._emit(Deposit(sender, receiver, received, shares))
        return shares

    @external
    @nonreentrant
    def mint(self, shares, receiver, sender):
        if uint256(shares) == 0:
            raise ZeroAmount("cannot mint 0 shares")
        receiver = to_address(receiver)
        self._check_not_paused()
        self._check_recipient(receiver)

        assets = self.previewMint(shares)
        if assets == 0:
            raise ZeroAmount("cannot deposit 0 amount")

        received = self._pull_assets(sender, assets)
        if received != assets:
            raise TransferAmountMismatch("received amount mismatch")

        self._mint(receiver, shares)
        self._emit(Deposit(sender, receiver, assets, shares))
        return assets

    ############
    # Withdraw #
    ############

    @external
    @nonreentrant
    def withdraw(self, assets, receiver, owner, sender):
        if uint256(assets) == 0:
            raise ZeroAmount("cannot withdraw 0 amount")
        receiver = to_address(receiver)
        owner = to_address(owner)
        self._check_not_paused()
        self._check_recipient(receiver)

        shares = self.previewWithdraw(assets)
        if shares == 0:
            raise ZeroAmount("cannot burn 0 shares")

        if sender != owner:
            self._spend_allowance(owner, sender, shares)

        self._burn(owner, shares, "insufficient shares")
        self._send_assets(receiver, assets)

        self._emit(Withdraw(sender, receiver, owner, assets, shares))
        return shares

    @external
    @nonreentrant
    def redeem(self, shares, receiver, owner, sender):
        if uint256(shares) == 0:
            raise ZeroAmount("cannot redeem 0 shares")
        receiver = to_address(receiver)
        owner = to_address(owner)
        self._check_not_paused()
        self._check_recipient(receiver)

        if sender != owner:
            self._spend_allowance(owner, sender, shares)
        if self.balanceOf(owner) < shares:
            raise InsufficientBalance("insufficient shares")

        assets = self.previewRedeem(shares)
        if assets == 0:
            raise ZeroAmount("cannot withdraw 0 amount")

        self._burn(owner, shares, "insufficient shares")
        self._send_assets(receiver, assets)

        self._emit(Withdraw(sender, receiver, owner, assets, shares))
        return assets

    #########
    # Admin #
    #########

    @external
    def pause(self, sender):
        self._access.check(PAUSER, sender)
        self.storage.isPaused = True
        self._emit(PauseToggled(True, sender))

    @external
    def unpause(self, sender):
        self._access.check(PAUSER, sender)
        self.storage.isPaused = False
        self._emit(PauseToggled(False, sender))

    ############
    # Internal #
    ############

    def _check_not_paused(self):
        if self.storage.isPaused:
            raise Paused("paused")

    def _pull_assets(self, sender, assets):
        before = self._asset.balanceOf(self.address)
        self._asset.transferFrom(sender, self.address, assets, sender=self.address)
        after = self._asset.balanceOf(self.address)
        if after < before:
            raise TransferAmountMismatch("vault balance decreased on deposit")
        return after - before

    def _send_assets(self, receiver, assets):
        self._transfer_out(receiver, assets)

    def _transfer_out(self, recipient, assets):
        before = self._asset.balanceOf(self.address)
        self._asset.transfer(recipient, assets, sender=self.address)
        sent = before - self._asset.balanceOf(self.address)
        if sent != assets:
            raise TransferAmountMismatch("sent amount mismatch")
