from scripts.utils.simulation import Simulation


def run(simulation: Simulation):
    simulation.log.h2("Bootstrap and proportional deposit")
    asset = simulation.deploy_asset()
    vault = simulation.deploy_vault(asset)

    alice = simulation.account("alice")
    bob = simulation.account("bob")
    simulation.fund(asset, alice, 100)
    simulation.fund(asset, bob, 50)
    simulation.execute(asset.approve, vault, 100, sender=alice)
    simulation.execute(asset.approve, vault, 50, sender=bob)

    alice_shares = simulation.execute(vault.deposit, 100, alice, sender=alice)
    assert alice_shares == 100
    assert vault.totalSupply() == vault.totalAssets() == 100

    bob_shares = simulation.execute(vault.deposit, 50, bob, sender=bob)
    assert bob_shares == 50

    simulation.record("aliceShares", alice_shares)
    simulation.record("bobShares", bob_shares)
    simulation.record("totalAssets", vault.totalAssets())
    simulation.record("totalSupply", vault.totalSupply())
