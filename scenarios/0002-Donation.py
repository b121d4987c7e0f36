from scripts.utils.simulation import Simulation


def run(simulation: Simulation):
    simulation.log.h2("Donation raises share value without minting")
    asset = simulation.deploy_asset()
    vault = simulation.deploy_vault(asset)

    alice = simulation.account("alice")
    donor = simulation.account("donor")
    simulation.fund(asset, alice, 100)
    simulation.fund(asset, donor, 100)
    simulation.execute(asset.approve, vault, 100, sender=alice)
    simulation.execute(vault.deposit, 100, alice, sender=alice)

    # straight transfer, no deposit
    simulation.execute(asset.transfer, vault, 100, sender=donor)
    assert vault.totalSupply() == 100
    assert vault.convertToAssets(100) == 200

    redeemed = simulation.execute(vault.redeem, 100, alice, alice, sender=alice)
    assert redeemed == 200

    simulation.record("redeemed", redeemed)
    simulation.record("totalSupply", vault.totalSupply())
