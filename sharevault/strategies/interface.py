from typing import Protocol


class Strategy(Protocol):
    """
    What a vault needs from a strategy.

    `totalAssets()` is self-reported and trusted as-is; the vault's only check
    is the balance delta it observes when asking for assets back. Mutating
    calls must reject any `sender` other than the wired vault.
    """

    address: str

    def asset(self) -> str: ...

    def totalAssets(self) -> int: ...

    def deposit(self, assets: int, sender: str = None) -> None: ...

    def withdraw(self, assets: int, sender: str = None) -> None: ...
