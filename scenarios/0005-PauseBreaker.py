from sharevault.errors import Paused
from scripts.utils.simulation import Simulation


def run(simulation: Simulation):
    simulation.log.h2("Pause gates entry operations only")
    asset = simulation.deploy_asset()
    vault = simulation.deploy_vault(asset)

    alice = simulation.account("alice")
    simulation.fund(asset, alice, 100)
    simulation.execute(asset.approve, vault, 100, sender=alice)
    simulation.execute(vault.deposit, 60, alice, sender=alice)

    simulation.execute(vault.pause)
    simulation.expect_failure(Paused, vault.deposit, 40, alice, sender=alice)
    simulation.expect_failure(Paused, vault.redeem, 10, alice, alice, sender=alice)
    assert vault.previewRedeem(60) == 60
    assert vault.balanceOf(alice) == 60

    simulation.execute(vault.unpause)
    redeemed = simulation.execute(vault.redeem, 60, alice, alice, sender=alice)

    simulation.record("redeemedAfterUnpause", redeemed)
