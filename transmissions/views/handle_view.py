import logging
from django.contrib import messages
from django.shortcuts import render
from transmissions.exceptions import StoreError
from transmissions.services import FeedService
from transmissions.services.feed import HandleHistory
from transmissions.utils import normalize_handle

logger = logging.getLogger(__name__)

__all__ = ["handle_detail"]


def handle_detail(request, handle):
    """History page for one canonical handle."""
    try:
        history = FeedService().handle_history(handle)
    except StoreError as e:
        logger.error("Handle history failed for %r: %s", handle, e)
        messages.error(request, f"Logs error: {e.message}")
        history = HandleHistory(
            raw_handle=handle,
            signature=normalize_handle(handle),
            display_name=handle or "unknown",
        )
    return render(request, 'content/handle.html', {'history': history})
