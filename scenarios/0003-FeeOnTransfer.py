from sharevault.errors import TransferAmountMismatch
from sharevault.mock.mock_fee_token import MockFeeToken
from scripts.utils.simulation import Simulation


def run(simulation: Simulation):
    simulation.log.h2("Fee-skimming asset: shares follow what arrived")
    fee_bps = simulation.blueprint.PARAMS["FEE_TOKEN_FEE_BPS"]
    hundred = simulation.blueprint.CONSTANTS.HUNDRED_PERCENT
    asset = simulation.deploy_asset("FEE_TOKEN", MockFeeToken, fee_bps)
    vault = simulation.deploy_vault(asset)

    alice = simulation.account("alice")
    amount = 1_000 * simulation.blueprint.unit
    simulation.execute(asset.transfer, alice, amount * 2)
    funded = asset.balanceOf(alice)
    simulation.execute(asset.approve, vault, funded, sender=alice)

    shares = simulation.execute(vault.deposit, amount, alice, sender=alice)
    expected = amount - amount * fee_bps // hundred
    assert shares == expected
    assert vault.totalAssets() == expected

    if fee_bps:
        # shares bought by exact amount cannot be paid for with a skimmed transfer
        simulation.expect_failure(TransferAmountMismatch, vault.mint, amount // 2, alice, sender=alice)

    simulation.record("declared", amount)
    simulation.record("sharesMinted", shares)
