import contextlib
import copy
import threading

from eth_utils import keccak, to_checksum_address


class Env:
    """
    In-memory chain the ledger contracts live on.

    Calls are globally sequential: a top-level call holds the environment lock
    until it returns, and nested calls made while it runs (contract to
    contract) join it. Every call is atomic at its own depth. Storage of
    every registered contract is snapshotted on entry and restored if any
    exception escapes, and the events it emitted are dropped. Events of
    nested calls surface only once the top-level call returns.
    """

    def __init__(self):
        self._contracts = {}
        self._aliases = {}
        self._nonce = 0
        self._depth = 0
        self._lock = threading.RLock()
        self._pending_logs = []
        self._last_logs = []
        self.on_log = None
        self.eoa = self.generate_address("eoa")

    # accounts

    def generate_address(self, alias=None):
        self._nonce += 1
        seed = f"{self._nonce}:{alias or 'account'}"
        address = to_checksum_address(keccak(text=seed)[-20:])
        self._aliases[address] = alias
        return address

    def lookup_alias(self, address):
        return self._aliases.get(to_checksum_address(address))

    # contracts

    def register(self, contract):
        if contract.address in self._contracts:
            raise ValueError(f"address already in use: {contract.address}")
        self._contracts[contract.address] = contract

    def get_contract(self, address):
        return self._contracts.get(to_checksum_address(address))

    @property
    def contracts(self):
        return list(self._contracts.values())

    # state

    def _snapshot(self):
        return {address: copy.deepcopy(c.storage) for address, c in self._contracts.items()}

    def _restore(self, snapshot):
        for address, storage in snapshot.items():
            self._contracts[address].storage = storage

    @contextlib.contextmanager
    def anchor(self):
        """Restores all contract storage on exit, whatever happened inside."""
        with self._lock:
            snapshot = self._snapshot()
            try:
                yield
            finally:
                self._restore(snapshot)
                self._last_logs = []

    @contextlib.contextmanager
    def call(self):
        with self._lock:
            if self._depth > 0:
                # a nested call reverts on its own, so a caller that catches
                # its failure keeps running on the state from before it
                snapshot = self._snapshot()
                log_count = len(self._pending_logs)
                self._depth += 1
                try:
                    yield
                except Exception:
                    self._restore(snapshot)
                    del self._pending_logs[log_count:]
                    raise
                finally:
                    self._depth -= 1
                return

            snapshot = self._snapshot()
            self._pending_logs = []
            self._depth = 1
            try:
                yield
            except Exception:
                self._restore(snapshot)
                self._pending_logs = []
                self._last_logs = []
                raise
            finally:
                self._depth = 0

            self._last_logs = self._pending_logs
            self._pending_logs = []
            for address, event in self._last_logs:
                self._notify(address, event)

    @property
    def in_call(self):
        return self._depth > 0

    # logs

    def emit(self, contract, event):
        if self._depth > 0:
            self._pending_logs.append((contract.address, event))
            return
        # emitted outside any call (constructors)
        self._last_logs = self._last_logs + [(contract.address, event)]
        self._notify(contract.address, event)

    def get_logs(self, address=None):
        if address is None:
            return [event for _, event in self._last_logs]
        return [event for a, event in self._last_logs if a == address]

    def _notify(self, address, event):
        if self.on_log is not None:
            self.on_log(self._contracts.get(address), event)
