# basis points
HUNDRED_PERCENT = 100_00


PARAMS = {
    "local": {
        # asset
        "ASSET_DECIMALS": 18,
        "ASSET_INITIAL_SUPPLY": 1_000_000_000,  # whole tokens, minted to governance
        "WHALE_BALANCE": 100_000_000,  # whole tokens
        # adversarial assets
        "FEE_TOKEN_FEE_BPS": 10_00,
        "FALSE_SUCCESS_DELIVER_BPS": 0,
        # strategy
        "LEAKY_STRATEGY_LEAK_BPS": 50_00,
    },
    "usdc": {
        # asset
        "ASSET_DECIMALS": 6,
        "ASSET_INITIAL_SUPPLY": 1_000_000_000,
        "WHALE_BALANCE": 100_000_000,
        # adversarial assets
        "FEE_TOKEN_FEE_BPS": 1_00,
        "FALSE_SUCCESS_DELIVER_BPS": 50_00,
        # strategy
        "LEAKY_STRATEGY_LEAK_BPS": 1,
    },
}


TOKENS = {
    "local": {
        "ASSET": {"name": "Mock Dollar", "symbol": "MUSD"},
        "FEE_TOKEN": {"name": "Fee Dollar", "symbol": "FEED"},
        "FALSE_SUCCESS_TOKEN": {"name": "Liar Dollar", "symbol": "LIAR"},
        "REENTRANT_TOKEN": {"name": "Hook Dollar", "symbol": "HOOK"},
    },
    "usdc": {
        "ASSET": {"name": "Mock USDC", "symbol": "USDC"},
        "FEE_TOKEN": {"name": "Fee USDC", "symbol": "fUSDC"},
        "FALSE_SUCCESS_TOKEN": {"name": "Liar USDC", "symbol": "lUSDC"},
        "REENTRANT_TOKEN": {"name": "Hook USDC", "symbol": "hUSDC"},
    },
}


VAULT_INFO = {
    "MUSD": {"name": "Share Vault Mock Dollar", "symbol": "svMUSD"},
    "USDC": {"name": "Share Vault USDC", "symbol": "svUSDC"},
    "FEED": {"name": "Share Vault Fee Dollar", "symbol": "svFEED"},
    "LIAR": {"name": "Share Vault Liar Dollar", "symbol": "svLIAR"},
    "HOOK": {"name": "Share Vault Hook Dollar", "symbol": "svHOOK"},
    "fUSDC": {"name": "Share Vault Fee USDC", "symbol": "svfUSDC"},
    "lUSDC": {"name": "Share Vault Liar USDC", "symbol": "svlUSDC"},
    "hUSDC": {"name": "Share Vault Hook USDC", "symbol": "svhUSDC"},
}
