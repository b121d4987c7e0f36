import pytest
from hypothesis import given, strategies as st

from constants import MAX_UINT256
from sharevault.errors import ZeroAmount
from sharevault.vaults.vault_math import Rounding, mul_div, to_assets, to_shares


##############
# Vault math #
##############


def test_mul_div_rounding():
    """Test both rounding directions, exact and inexact"""
    assert mul_div(10, 3, 4, Rounding.DOWN) == 7
    assert mul_div(10, 3, 4, Rounding.UP) == 8
    assert mul_div(10, 2, 4, Rounding.DOWN) == 5
    assert mul_div(10, 2, 4, Rounding.UP) == 5
    assert mul_div(0, 7, 3, Rounding.UP) == 0

    with pytest.raises(ZeroDivisionError):
        mul_div(1, 1, 0, Rounding.DOWN)


def test_conversion_bootstrap():
    """Test that an empty supply converts 1:1 in both directions"""
    for rounding in Rounding:
        assert to_shares(123, 0, 0, rounding) == 123
        assert to_assets(123, 0, 0, rounding) == 123
        # assets without shares (a donation into an empty vault)
        assert to_shares(123, 500, 0, rounding) == 123


def test_conversion_wiped_pool():
    """Test outstanding shares with nothing behind them"""
    assert to_shares(10, 0, 100, Rounding.DOWN) == 0
    assert to_shares(10, 0, 100, Rounding.UP) == MAX_UINT256
    assert to_shares(0, 0, 100, Rounding.UP) == 0
    assert to_assets(10, 0, 100, Rounding.UP) == 0


def test_max_withdraw_formula_grid():
    """
    Test on every small pool that floor(b * T / S) is the largest amount
    whose ceil-rounded share cost fits in b shares
    """
    for total_supply in range(1, 31):
        for total_assets in range(1, 31):
            for balance in range(total_supply + 1):
                assets = to_assets(balance, total_assets, total_supply, Rounding.DOWN)
                assert to_shares(assets, total_assets, total_supply, Rounding.UP) <= balance
                assert to_shares(assets + 1, total_assets, total_supply, Rounding.UP) > balance


@given(
    assets=st.integers(min_value=0, max_value=10 ** 30),
    total_assets=st.integers(min_value=1, max_value=10 ** 30),
    total_supply=st.integers(min_value=1, max_value=10 ** 30),
)
def test_conversion_directions_bracket(assets, total_assets, total_supply):
    """Test that DOWN never exceeds UP and they differ by at most one"""
    down = to_shares(assets, total_assets, total_supply, Rounding.DOWN)
    up = to_shares(assets, total_assets, total_supply, Rounding.UP)
    assert down <= up <= down + 1
    assert up * total_assets >= assets * total_supply >= down * total_assets


###################
# Vault favouring #
###################


@pytest.fixture
def odd_pool(share_vault, asset_token, depositFor, governance, bob):
    # 150 assets behind 100 shares
    depositFor(share_vault, bob, 100)
    asset_token.transfer(share_vault, 50, sender=governance)
    return share_vault


def test_previews_round_against_the_caller(odd_pool):
    """Test each preview's rounding direction on a 3:2 pool"""
    assert odd_pool.previewDeposit(1) == 0
    assert odd_pool.previewDeposit(2) == 1
    assert odd_pool.previewMint(1) == 2
    assert odd_pool.previewWithdraw(1) == 1
    assert odd_pool.previewWithdraw(2) == 2
    assert odd_pool.previewRedeem(1) == 1
    assert odd_pool.previewRedeem(3) == 4


def test_deposit_too_small_for_a_share(odd_pool, asset_token, governance, alice):
    """Test that a deposit worth less than one share is rejected"""
    asset_token.transfer(alice, 1, sender=governance)
    asset_token.approve(odd_pool, 1, sender=alice)

    with pytest.raises(ZeroAmount, match="cannot mint 0 shares"):
        odd_pool.deposit(1, alice, sender=alice)

    assert asset_token.balanceOf(alice) == 1
    assert odd_pool.totalAssets() == 150


def test_redeem_dust_stays_in_the_pool(odd_pool, asset_token, bob):
    """Test that the rounded-off part of a redemption is left to the remaining holders"""
    # one share is worth 1.5 assets
    assert odd_pool.redeem(1, bob, bob, sender=bob) == 1
    assert asset_token.balanceOf(bob) == 1

    assert odd_pool.totalAssets() == 149
    assert odd_pool.totalSupply() == 99
    assert odd_pool.previewRedeem(99) == 149


def test_max_withdraw_matches_preview(odd_pool, bob, alice):
    """Test that maxWithdraw is affordable and one more asset is not"""
    max_assets = odd_pool.maxWithdraw(bob)
    assert max_assets == 150
    assert odd_pool.previewWithdraw(max_assets) <= odd_pool.balanceOf(bob)
    assert odd_pool.maxRedeem(bob) == 100
    assert odd_pool.maxWithdraw(alice) == 0

    assert odd_pool.withdraw(max_assets, bob, bob, sender=bob) == 100
    assert odd_pool.totalSupply() == 0


@given(amount=st.integers(min_value=1, max_value=10 ** 6))
def test_deposit_then_redeem_never_profits(env, odd_pool, asset_token, governance, alice, amount):
    """Test that a deposit followed by redeeming every share returns at most the deposit"""
    with env.anchor():
        asset_token.transfer(alice, amount, sender=governance)
        asset_token.approve(odd_pool, amount, sender=alice)
        if odd_pool.previewDeposit(amount) == 0:
            with pytest.raises(ZeroAmount):
                odd_pool.deposit(amount, alice, sender=alice)
            return

        shares = odd_pool.deposit(amount, alice, sender=alice)
        assert odd_pool.previewRedeem(shares) <= amount
        assert odd_pool.redeem(shares, alice, alice, sender=alice) <= amount


@given(shares=st.integers(min_value=1, max_value=10 ** 6))
def test_mint_then_redeem_never_profits(env, odd_pool, asset_token, governance, alice, shares):
    """Test that minting shares and redeeming them returns at most what was paid"""
    with env.anchor():
        cost = odd_pool.previewMint(shares)
        asset_token.transfer(alice, cost, sender=governance)
        asset_token.approve(odd_pool, cost, sender=alice)

        assert odd_pool.mint(shares, alice, sender=alice) == cost
        assert odd_pool.redeem(shares, alice, alice, sender=alice) <= cost


@given(assets=st.integers(min_value=1, max_value=150))
def test_withdraw_burns_at_least_fair_shares(env, odd_pool, bob, assets):
    """Test that a withdrawal burns no fewer shares than its fair share count"""
    with env.anchor():
        total_assets = odd_pool.totalAssets()
        total_supply = odd_pool.totalSupply()
        shares = odd_pool.withdraw(assets, bob, bob, sender=bob)
        assert shares * total_assets >= assets * total_supply


def test_rounding_on_four_over_three(share_vault, asset_token, depositFor, governance, bob):
    """Test a 4 asset / 3 share pool in both directions"""
    depositFor(share_vault, bob, 3)
    asset_token.transfer(share_vault, 1, sender=governance)

    assert share_vault.previewRedeem(1) == 1
    assert share_vault.previewWithdraw(1) == 1
    assert share_vault.redeem(1, bob, bob, sender=bob) == 1
    # 3 assets behind 2 shares: one asset still costs one share
    assert share_vault.withdraw(1, bob, bob, sender=bob) == 1
    assert share_vault.totalSupply() == 1
    assert share_vault.totalAssets() == 2
