import functools
from types import SimpleNamespace

from eth_utils import to_checksum_address

from sharevault.constants import MAX_UINT256


def to_address(value):
    """Accepts a contract or an address string, returns the checksummed address."""
    if isinstance(value, Contract):
        return value.address
    return to_checksum_address(value)


def uint256(value, name="amount"):
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= MAX_UINT256:
        raise ValueError(f"invalid {name}: {value!r}")
    return value


def external(func):
    """
    Marks a state-mutating entry point.

    The caller is passed as `sender=` (defaults to `env.eoa`) and the body
    runs inside `Env.call`, so a failure anywhere below it leaves no trace.
    """

    @functools.wraps(func)
    def wrapper(self, *args, sender=None, **kwargs):
        sender = self.env.eoa if sender is None else to_address(sender)
        with self.env.call():
            return func(self, *args, sender=sender, **kwargs)

    return wrapper


class Contract:
    """
    Base for everything deployed into an `Env`.

    Mutable state lives in `self.storage` and must be plain data, since the
    environment deep-copies it to roll back failed calls. References to other
    contracts are wiring, fixed at construction, and live outside storage.
    """

    def __init__(self, env, label):
        self.env = env
        self.label = label
        self.address = env.generate_address(label)
        self.storage = SimpleNamespace()
        env.register(self)

    def get_logs(self):
        return self.env.get_logs(self.address)

    def _emit(self, event):
        self.env.emit(self, event)

    def __eq__(self, other):
        if isinstance(other, Contract):
            return self.address == other.address
        if isinstance(other, str):
            return self.address.lower() == other.lower()
        return NotImplemented

    def __hash__(self):
        return hash(self.address)

    def __repr__(self):
        return f"<{type(self).__name__} {self.label} at {self.address}>"
