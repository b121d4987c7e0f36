from sharevault import Env
from sharevault.modules.access import AccessPolicy
from sharevault.vaults.erc4626 import Erc4626Vault
from sharevault.vaults.strategy_vault import StrategyVault
from sharevault.mock.mock_erc20 import MockErc20
from scripts.utils import log
from scripts.utils.deploy_args import DeployArgs


class Simulation:
    """
    Handed to each scenario's `run` function. Owns a fresh `Env`, deploys
    contracts under labels, executes calls with logging, and collects the
    results that end up in the manifest.
    """

    def __init__(self, deploy_args: DeployArgs, number, name):
        self._deploy_args = deploy_args
        self._number = number
        self._name = name
        self._count = 0
        self._contracts = {}
        self._results = {}
        self.env = Env()
        if deploy_args.verbose:
            self.env.on_log = log.event
        self.deployer = self.env.eoa

    @property
    def blueprint(self):
        return self._deploy_args.blueprint

    @property
    def log(self):
        return log

    def account(self, alias):
        return self.env.generate_address(alias)

    # deployment

    def deploy(self, label, factory, *args, **kwargs):
        """
        Deploys `factory(env, *args, **kwargs)` under `label`.
        Returns the deployed contract.
        """
        self._count += 1
        log.h2(f"Transaction {self._count} for scenario {self._number} - Deploying {label}")
        contract = factory(self.env, *args, label=label, **kwargs)
        self._contracts[label] = contract
        log.h3(f"Contract {label} deployed at {contract.address}")
        return contract

    def get_contract(self, label):
        return self._contracts[label]

    def deploy_asset(self, token_key="ASSET", factory=MockErc20, *args):
        token = self.blueprint.TOKENS[token_key]
        return self.deploy(
            token["symbol"],
            factory,
            self.deployer,
            token["name"],
            token["symbol"],
            self.blueprint.PARAMS["ASSET_DECIMALS"],
            self.blueprint.PARAMS["ASSET_INITIAL_SUPPLY"],
            *args,
        )

    def deploy_vault(self, asset, strategy=None, access_policy=None):
        if access_policy is None:
            access_policy = self._contracts.get("access_policy") or self.deploy("access_policy", AccessPolicy, self.deployer)
        info = self.blueprint.VAULT_INFO[asset.symbol()]
        if strategy is None:
            return self.deploy(info["symbol"], Erc4626Vault, asset, info["name"], info["symbol"], access_policy)
        vault = self.deploy(info["symbol"], StrategyVault, asset, strategy, info["name"], info["symbol"], access_policy)
        self.execute(strategy.setVault, vault)
        return vault

    def fund(self, token, account, amount):
        """Sends `amount` raw units from the deployer (the token's governance)."""
        return self.execute(token.transfer, account, amount)

    # calls

    def execute(self, transaction, *args, **kwargs):
        """
        Runs a contract call, defaulting the sender to the deployer.
        Returns the call's return value.
        """
        self._count += 1
        kwargs.setdefault("sender", self.deployer)
        log.h2(
            f"Transaction {self._count} for scenario {self._number} - {_describe(transaction)} {args}"
        )
        result = transaction(*args, **kwargs)
        log.h3("Transaction confirmed")
        return result

    def expect_failure(self, kind, transaction, *args, **kwargs):
        """Runs a call that must fail with `kind`. Returns the raised error."""
        try:
            self.execute(transaction, *args, **kwargs)
        except kind as exception:
            log.h3(f"Reverted as expected: {type(exception).__name__}({exception.reason})")
            return exception
        raise AssertionError(f"{_describe(transaction)} did not fail with {kind.__name__}")

    # results

    def record(self, key, value):
        self._results[key] = value
        log.h3(f"{key} = {value}")

    def manifest(self):
        return {
            "blueprint": self.blueprint.blueprint,
            "scenarios": {
                self._number: {
                    "name": self._name,
                    "transactions": self._count,
                    "contracts": {
                        label: {"address": c.address, "type": type(c).__name__}
                        for label, c in self._contracts.items()
                    },
                    "results": dict(self._results),
                },
            },
        }


def _describe(transaction):
    owner = getattr(transaction, "__self__", None)
    name = getattr(transaction, "__name__", str(transaction))
    if owner is None:
        return name
    return f"{getattr(owner, 'name', type(owner).__name__)}.{name}"
