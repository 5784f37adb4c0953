import enum

from .base import RecordModel


class OrganizationKind(str, enum.Enum):
    STATION = "station"
    HOSPITAL = "hospital"
    COURT = "court"


ID_PREFIXES = {
    OrganizationKind.STATION: "POL",
    OrganizationKind.HOSPITAL: "HOS",
    OrganizationKind.COURT: "CRT",
}


class Organization(RecordModel):
    """Police station, hospital or court."""

    id: str
    name: str
    location: str = ""
    contact: str = ""
