import pytest
from hypothesis import HealthCheck, settings

pytest_plugins = [
    "conf_env",
    "conf_mock",
    "conf_core",
    "conf_utils",
]

settings.register_profile(
    "sharevault",
    max_examples=50,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("sharevault")


@pytest.fixture(autouse=True)
def isolate(env, asset_token_whale, strategy_vault, leaky_strategy_vault):
    # session deployments that run setup calls must exist before the anchor
    with env.anchor():
        yield
