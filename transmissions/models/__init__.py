from .user import User
from .handle import Handle
from .report import Report
from .flag import Flag
from .dispute import Dispute

__all__ = [
    "User",
    "Handle",
    "Report",
    "Flag",
    "Dispute",
]
