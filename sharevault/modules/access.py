from sharevault.constants import ZERO_ADDRESS
from sharevault.contract import Contract, external, to_address
from sharevault.errors import Unauthorized
from sharevault.events import RoleGranted, RoleOpenSet, RoleRevoked

PAUSER = "PAUSER"
STRATEGIST = "STRATEGIST"

ROLES = (PAUSER, STRATEGIST)


class AccessPolicy(Contract):
    """
    Role table injected into vaults.

    Vaults never compare addresses themselves; they ask the policy. The admin
    starts with every role and is the only account that can change the table.
    A role marked open is held by everyone.
    """

    def __init__(self, env, admin, label="access_policy"):
        super().__init__(env, label)
        admin = to_address(admin)
        if admin == ZERO_ADDRESS:
            raise ValueError("invalid admin")
        self._admin = admin
        self.storage.members = {role: {admin} for role in ROLES}
        self.storage.open = {role: False for role in ROLES}

    def admin(self):
        return self._admin

    def hasRole(self, role, account):
        self._check_known(role)
        if self.storage.open[role]:
            return True
        return to_address(account) in self.storage.members[role]

    def isRoleOpen(self, role):
        self._check_known(role)
        return self.storage.open[role]

    def check(self, role, account):
        if not self.hasRole(role, account):
            raise Unauthorized("no perms")

    @external
    def grantRole(self, role, account, sender):
        self._only_admin(sender)
        self._check_known(role)
        account = to_address(account)
        if account == ZERO_ADDRESS:
            raise ValueError("invalid account")
        self.storage.members[role].add(account)
        self._emit(RoleGranted(role, account, sender))

    @external
    def revokeRole(self, role, account, sender):
        self._only_admin(sender)
        self._check_known(role)
        account = to_address(account)
        self.storage.members[role].discard(account)
        self._emit(RoleRevoked(role, account, sender))

    @external
    def setRoleOpen(self, role, isOpen, sender):
        self._only_admin(sender)
        self._check_known(role)
        self.storage.open[role] = bool(isOpen)
        self._emit(RoleOpenSet(role, bool(isOpen), sender))

    def _only_admin(self, sender):
        if sender != self._admin:
            raise Unauthorized("no perms")

    @staticmethod
    def _check_known(role):
        if role not in ROLES:
            raise ValueError(f"unknown role: {role}")
