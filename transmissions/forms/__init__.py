from .report_form import ReportForm
from .dispute_form import DisputeForm
from .log_in_form import MagicLinkForm

__all__ = [
    "ReportForm",
    "DisputeForm",
    "MagicLinkForm",
]
