from sharevault.strategies.simple import SimpleStrategy
from scripts.utils.simulation import Simulation


def run(simulation: Simulation):
    simulation.log.h2("Strategy loss is socialized through the share price")
    asset = simulation.deploy_asset()
    strategy = simulation.deploy("simple_strategy", SimpleStrategy, asset, simulation.deployer)
    vault = simulation.deploy_vault(asset, strategy)

    alice = simulation.account("alice")
    bob = simulation.account("bob")
    for holder in (alice, bob):
        simulation.fund(asset, holder, 100)
        simulation.execute(asset.approve, vault, 100, sender=holder)
        simulation.execute(vault.deposit, 100, holder, sender=holder)

    simulation.execute(vault.deployToStrategy, 200)
    assert vault.idleAssets() == 0
    assert vault.totalAssets() == 200

    simulation.execute(strategy.simulateLoss, 40)
    assert vault.convertToAssets(vault.balanceOf(alice)) == 80
    assert vault.convertToAssets(vault.balanceOf(bob)) == 80

    # idle is empty, so the payout is pulled from the strategy first
    paid = simulation.execute(vault.redeem, 100, alice, alice, sender=alice)
    assert paid == 80
    assert vault.totalAssets() == vault.idleAssets() + strategy.totalAssets()

    simulation.record("alicePaid", paid)
    simulation.record("bobClaim", vault.convertToAssets(vault.balanceOf(bob)))
