import pytest

from constants import ZERO_ADDRESS, MAX_UINT256
from conf_utils import filter_logs
from config.BluePrint import PARAMS, TOKENS
from sharevault.errors import InsufficientAllowance, InsufficientBalance, InvalidRecipient, Unauthorized, ZeroAmount


def test_asset_token_basic_info(asset_token, governance, fork, unit):
    """Test basic ERC20 token information for the mock asset"""
    assert asset_token.name() == TOKENS[fork]["ASSET"]["name"]
    assert asset_token.symbol() == TOKENS[fork]["ASSET"]["symbol"]
    assert asset_token.decimals() == PARAMS[fork]["ASSET_DECIMALS"]
    assert asset_token.totalSupply() == PARAMS[fork]["ASSET_INITIAL_SUPPLY"] * unit
    assert asset_token.governance() == governance


def test_asset_token_transfer(asset_token, asset_token_whale, bob, alice, unit):
    """Test basic ERC20 transfer functionality"""
    whale = asset_token_whale
    initial_balance = asset_token.balanceOf(whale)
    transfer_amount = 100 * unit

    assert asset_token.transfer(bob, transfer_amount, sender=whale)

    log = filter_logs(asset_token, "Transfer")[0]
    assert log.sender == whale
    assert log.recipient == bob
    assert log.amount == transfer_amount

    assert asset_token.balanceOf(whale) == initial_balance - transfer_amount
    assert asset_token.balanceOf(bob) == transfer_amount

    # transfer to zero address
    with pytest.raises(InvalidRecipient, match="invalid recipient"):
        asset_token.transfer(ZERO_ADDRESS, transfer_amount, sender=whale)

    # transfer to the token itself
    with pytest.raises(InvalidRecipient, match="invalid recipient"):
        asset_token.transfer(asset_token.address, transfer_amount, sender=whale)

    with pytest.raises(ZeroAmount, match="cannot transfer 0 amount"):
        asset_token.transfer(bob, 0, sender=whale)

    with pytest.raises(InsufficientBalance, match="insufficient funds"):
        asset_token.transfer(whale, transfer_amount, sender=alice)


def test_asset_token_approve(asset_token, asset_token_whale, bob, unit):
    """Test ERC20 approve functionality"""
    whale = asset_token_whale
    approve_amount = 100 * unit

    assert asset_token.approve(bob, approve_amount, sender=whale)

    log = filter_logs(asset_token, "Approval")[0]
    assert log.owner == whale
    assert log.spender == bob
    assert log.amount == approve_amount

    assert asset_token.allowance(whale, bob) == approve_amount

    with pytest.raises(InvalidRecipient, match="invalid spender"):
        asset_token.approve(ZERO_ADDRESS, approve_amount, sender=whale)


def test_asset_token_transfer_from(asset_token, asset_token_whale, bob, alice, unit):
    """Test ERC20 transferFrom functionality"""
    whale = asset_token_whale
    approve_amount = 100 * unit
    transfer_amount = 50 * unit

    asset_token.approve(bob, approve_amount, sender=whale)

    assert asset_token.transferFrom(whale, alice, transfer_amount, sender=bob)

    log = filter_logs(asset_token, "Transfer")[0]
    assert log.sender == whale
    assert log.recipient == alice
    assert log.amount == transfer_amount

    assert asset_token.balanceOf(alice) == transfer_amount
    assert asset_token.allowance(whale, bob) == approve_amount - transfer_amount

    with pytest.raises(InsufficientAllowance, match="insufficient allowance"):
        asset_token.transferFrom(whale, alice, approve_amount, sender=bob)


def test_asset_token_infinite_allowance(asset_token, asset_token_whale, bob, alice, unit):
    """Max allowance is never decremented"""
    asset_token.approve(bob, MAX_UINT256, sender=asset_token_whale)
    asset_token.transferFrom(asset_token_whale, alice, 10 * unit, sender=bob)
    assert asset_token.allowance(asset_token_whale, bob) == MAX_UINT256


def test_asset_token_mint(asset_token, governance, bob, unit):
    """Only governance mints, and minting grows supply"""
    supply = asset_token.totalSupply()

    asset_token.mint(bob, 5 * unit, sender=governance)
    assert asset_token.balanceOf(bob) == 5 * unit
    assert asset_token.totalSupply() == supply + 5 * unit

    log = filter_logs(asset_token, "Transfer")[0]
    assert log.sender == ZERO_ADDRESS
    assert log.recipient == bob

    with pytest.raises(Unauthorized, match="no perms"):
        asset_token.mint(bob, 5 * unit, sender=bob)


def test_asset_token_rejects_bad_amounts(asset_token, asset_token_whale, bob):
    """Amounts must be non-negative integers within uint256"""
    with pytest.raises(ValueError):
        asset_token.transfer(bob, -1, sender=asset_token_whale)

    with pytest.raises(ValueError):
        asset_token.transfer(bob, MAX_UINT256 + 1, sender=asset_token_whale)

    with pytest.raises(ValueError):
        asset_token.transfer(bob, True, sender=asset_token_whale)
