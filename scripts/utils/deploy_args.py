from config.BluePrint import PARAMS, TOKENS, VAULT_INFO, HUNDRED_PERCENT
from sharevault.constants import ZERO_ADDRESS, MAX_UINT256


class Constants:
    ZERO_ADDRESS = ZERO_ADDRESS
    MAX_UINT256 = MAX_UINT256
    HUNDRED_PERCENT = HUNDRED_PERCENT


class BluePrint:
    def __init__(self, blueprint):
        if blueprint not in PARAMS:
            raise ValueError(f"unknown blueprint `{blueprint}` (expected one of {sorted(PARAMS)})")
        self.blueprint = blueprint
        self.PARAMS = PARAMS[blueprint]
        self.TOKENS = TOKENS[blueprint]
        self.VAULT_INFO = VAULT_INFO
        self.CONSTANTS = Constants

    @property
    def unit(self):
        return 10 ** self.PARAMS["ASSET_DECIMALS"]

    def vault_info(self, token_key):
        return self.VAULT_INFO[self.TOKENS[token_key]["symbol"]]


class DeployArgs:
    def __init__(self, blueprint, verbose=False):
        self.blueprint = BluePrint(blueprint)
        self.verbose = verbose

    def __repr__(self):
        return f"DeployArgs(blueprint={self.blueprint.blueprint!r}, verbose={self.verbose})"
