import enum

from pydantic import field_validator

from .base import RecordModel


class Role(str, enum.Enum):
    POLICE = "police"
    JMO = "jmo"
    ATTORNEY = "attorney"
    JUDGE = "judge"
    ADMIN = "admin"


class AccountStatus(str, enum.Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


ATTORNEY_PLACE = "Bar Association / Private"


class Account(RecordModel):
    """User account. The password is stored in plain text."""

    id: str
    name: str
    email: str
    nic: str = ""
    role: Role
    contact: str = ""
    appointed_place: str = ""
    status: AccountStatus = AccountStatus.ACTIVE
    password: str = ""

    @field_validator("role", mode="before")
    @classmethod
    def _lowercase_role(cls, value):
        return value.lower() if isinstance(value, str) else value

    def public(self) -> dict:
        """Serialized account without the password."""
        record = self.to_record()
        record.pop("password", None)
        return record
