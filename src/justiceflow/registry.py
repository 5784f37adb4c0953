"""Organization and account collections managed by administrators."""

import logging
import re
from typing import Iterable, List, Optional

from pydantic import ValidationError

from .config import settings
from .schemas import (
    ATTORNEY_PLACE,
    Account,
    AccountStatus,
    ID_PREFIXES,
    Organization,
    OrganizationKind,
    Outcome,
    Role,
)
from .seed import SEED_ACCOUNTS, SEED_COURTS, SEED_HOSPITALS, SEED_STATIONS
from .storage import StorageBackend, get_backend
from .store import JsonCollection
from .utils.errors import ValidationFailed
from .validation import require, validate_password, validate_phone

logger = logging.getLogger(__name__)

_SUFFIX = re.compile(r"-(\d+)$")


def next_id(items: Iterable, prefix: str) -> str:
    """Next sequence id for a collection.

    Uses the highest existing numeric suffix, not the item count, so ids are
    never reused after a delete in the middle. Suffixes are zero-padded to
    three digits; an empty collection starts at 001.
    """
    suffixes = []
    for item in items:
        item_id = item.get("id") if isinstance(item, dict) else getattr(item, "id", None)
        match = _SUFFIX.search(item_id or "")
        suffixes.append(int(match.group(1)) if match else 0)

    if not suffixes:
        return f"{prefix}-001"
    return f"{prefix}-{max(suffixes) + 1:03d}"


_ORG_KEYS = {
    OrganizationKind.STATION: ("STATIONS_KEY", SEED_STATIONS),
    OrganizationKind.HOSPITAL: ("HOSPITALS_KEY", SEED_HOSPITALS),
    OrganizationKind.COURT: ("COURTS_KEY", SEED_COURTS),
}


class OrganizationRegistry:
    """Stations, hospitals or courts, one collection per kind."""

    def __init__(self, kind: OrganizationKind, backend: Optional[StorageBackend] = None):
        self.kind = OrganizationKind(kind)
        self.prefix = ID_PREFIXES[self.kind]
        key_setting, seed = _ORG_KEYS[self.kind]
        self.collection = JsonCollection(backend or get_backend(), getattr(settings, key_setting), seed=seed)

    def list(self) -> List[Organization]:
        orgs = []
        for item in self.collection.load():
            try:
                orgs.append(Organization.model_validate(item))
            except ValidationError:
                logger.warning(f"[registry] Skipping unreadable {self.kind.value} record")
        return orgs

    def names(self) -> List[str]:
        return [org.name for org in self.list()]

    @staticmethod
    def _validate(name: str, location: str, contact: str) -> None:
        require(name=name, location=location, contact=contact)
        validate_phone(contact)

    def create(self, name: str, location: str, contact: str) -> Outcome:
        try:
            self._validate(name, location, contact)
        except ValidationFailed as e:
            return Outcome.invalid(str(e))

        orgs = self.list()
        org = Organization(id=next_id(orgs, self.prefix), name=name, location=location, contact=contact)
        self.collection.save([o.to_record() for o in orgs] + [org.to_record()])
        logger.info(f"[registry] Created {self.kind.value} {org.id}")
        return Outcome.success(org)

    def update(self, org_id: str, name: str, location: str, contact: str) -> Outcome:
        try:
            self._validate(name, location, contact)
        except ValidationFailed as e:
            return Outcome.invalid(str(e))

        orgs = self.list()
        for index, existing in enumerate(orgs):
            if existing.id == org_id:
                orgs[index] = Organization(id=org_id, name=name, location=location, contact=contact)
                self.collection.save([o.to_record() for o in orgs])
                logger.info(f"[registry] Updated {self.kind.value} {org_id}")
                return Outcome.success(orgs[index])
        return Outcome.not_found(f"No {self.kind.value} with id {org_id}.")

    def delete(self, org_id: str) -> Outcome:
        orgs = self.list()
        remaining = [o for o in orgs if o.id != org_id]
        if len(remaining) == len(orgs):
            return Outcome.not_found(f"No {self.kind.value} with id {org_id}.")
        self.collection.save([o.to_record() for o in remaining])
        logger.info(f"[registry] Deleted {self.kind.value} {org_id}")
        return Outcome.success()


class AccountRegistry:
    """User accounts, keyed by id and looked up by email."""

    def __init__(self, backend: Optional[StorageBackend] = None):
        self.collection = JsonCollection(backend or get_backend(), settings.ACCOUNTS_KEY, seed=SEED_ACCOUNTS)

    def list(self) -> List[Account]:
        accounts = []
        for item in self.collection.load():
            try:
                accounts.append(Account.model_validate(item))
            except ValidationError:
                logger.warning("[registry] Skipping unreadable account record")
        return accounts

    def _save(self, accounts: List[Account]) -> None:
        self.collection.save([a.to_record() for a in accounts])

    def find_by_email(self, email: str) -> Optional[Account]:
        for account in self.list():
            if account.email == email:
                return account
        return None

    @staticmethod
    def _validate(name, email, nic, role, contact, appointed_place) -> str:
        """Validate profile fields and return the appointed place to store."""
        require(name=name, email=email, nic=nic, contact=contact)
        validate_phone(contact)
        try:
            role = Role(role)
        except ValueError as e:
            raise ValidationFailed(f"Unknown role: {role}.") from e
        if role == Role.ATTORNEY:
            return ATTORNEY_PLACE
        require(appointed_place=appointed_place)
        return appointed_place

    def create(
        self,
        name: str,
        email: str,
        nic: str,
        role: str,
        contact: str,
        password: str,
        appointed_place: str = "",
    ) -> Outcome:
        try:
            place = self._validate(name, email, nic, role, contact, appointed_place)
            require(password=password)
        except ValidationFailed as e:
            return Outcome.invalid(str(e))

        accounts = self.list()
        if any(a.email == email for a in accounts):
            return Outcome.invalid(f"An account with email {email} already exists.")

        account = Account(
            id=next_id(accounts, "USR"),
            name=name,
            email=email,
            nic=nic,
            role=role,
            contact=contact,
            appointed_place=place,
            status=AccountStatus.ACTIVE,
            password=password,
        )
        self._save(accounts + [account])
        logger.info(f"[registry] Created account {account.id} ({account.role.value})")
        return Outcome.success(account)

    def update(
        self,
        account_id: str,
        name: str,
        email: str,
        nic: str,
        role: str,
        contact: str,
        appointed_place: str = "",
        password: Optional[str] = None,
    ) -> Outcome:
        """Replace a profile; a blank password keeps the current one."""
        try:
            place = self._validate(name, email, nic, role, contact, appointed_place)
        except ValidationFailed as e:
            return Outcome.invalid(str(e))

        accounts = self.list()
        for index, existing in enumerate(accounts):
            if existing.id != account_id:
                continue
            if any(a.email == email and a.id != account_id for a in accounts):
                return Outcome.invalid(f"An account with email {email} already exists.")
            accounts[index] = Account(
                id=account_id,
                name=name,
                email=email,
                nic=nic,
                role=role,
                contact=contact,
                appointed_place=place,
                status=existing.status,
                password=password or existing.password,
            )
            self._save(accounts)
            logger.info(f"[registry] Updated account {account_id}")
            return Outcome.success(accounts[index])

        return Outcome.not_found(f"No account with id {account_id}.")

    def set_status(self, account_id: str, status: AccountStatus) -> Outcome:
        accounts = self.list()
        for index, existing in enumerate(accounts):
            if existing.id == account_id:
                accounts[index] = existing.model_copy(update={"status": AccountStatus(status)})
                self._save(accounts)
                return Outcome.success(accounts[index])
        return Outcome.not_found(f"No account with id {account_id}.")

    def delete(self, account_id: str) -> Outcome:
        accounts = self.list()
        remaining = [a for a in accounts if a.id != account_id]
        if len(remaining) == len(accounts):
            return Outcome.not_found(f"No account with id {account_id}.")
        self._save(remaining)
        logger.info(f"[registry] Deleted account {account_id}")
        return Outcome.success()

    def change_password(self, email: str, current: str, new: str, confirm: str) -> Outcome:
        """Self-service password change; requires the current password."""
        accounts = self.list()
        for index, existing in enumerate(accounts):
            if existing.email != email:
                continue
            if existing.password != current:
                return Outcome.denied("The current password you entered is incorrect.")
            try:
                validate_password(new)
            except ValidationFailed as e:
                return Outcome.invalid(str(e))
            if new != confirm:
                return Outcome.invalid("New passwords do not match.")

            accounts[index] = existing.model_copy(update={"password": new})
            self._save(accounts)
            logger.info(f"[registry] Password changed for account {existing.id}")
            return Outcome.success()

        return Outcome.not_found("Could not find your account.")


__all__ = ["next_id", "OrganizationRegistry", "AccountRegistry"]
