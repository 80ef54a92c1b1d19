from .handle_repo import HandleRepo
from .report_repo import ReportRepo
from .moderation_repo import FlagRepo, DisputeRepo
from .user_repo import UserRepo

__all__ = [
    "HandleRepo",
    "ReportRepo",
    "FlagRepo",
    "DisputeRepo",
    "UserRepo",
]
