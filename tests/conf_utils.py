import pytest


def filter_logs(contract, event_name):
    return [e for e in contract.get_logs() if type(e).__name__ == event_name]


@pytest.fixture(scope="session")
def snapshot():
    # everything an operation could touch, for "failed call changed nothing" checks
    def snapshot(vault, asset, *accounts):
        return (
            vault.totalSupply(),
            vault.totalAssets(),
            asset.balanceOf(vault),
            tuple(vault.balanceOf(a) for a in accounts),
            tuple(asset.balanceOf(a) for a in accounts),
        )

    yield snapshot


@pytest.fixture(scope="session")
def depositFor(asset_token, governance):
    # funds `_user` from governance and deposits on their behalf
    def depositFor(_vault, _user, _amount, _asset=asset_token, _funder=governance):
        _asset.transfer(_user, _amount, sender=_funder)
        _asset.approve(_vault, _amount, sender=_user)
        return _vault.deposit(_amount, _user, sender=_user)

    yield depositFor
