from .base import CaseService, today
from .police import PoliceService, POLICE_STATUSES
from .medical import MedicalService
from .court import CourtService
from .review import ReviewService

__all__ = [
    "CaseService",
    "today",
    "PoliceService",
    "POLICE_STATUSES",
    "MedicalService",
    "CourtService",
    "ReviewService",
]
