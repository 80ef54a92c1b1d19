import logging
from django.contrib import messages
from django.shortcuts import render
from transmissions.exceptions import StoreError
from transmissions.services import FeedService
from transmissions.services.feed import SearchResult

logger = logging.getLogger(__name__)

__all__ = ["search"]


def search(request):
    """Reports for every handle matching ``?q=`` by canonical key or name fragment."""
    query = request.GET.get("q", "")
    try:
        result = FeedService().search(query)
    except StoreError as e:
        logger.error("Search failed for %r: %s", query, e)
        messages.error(request, f"Search error: {e.message}")
        result = SearchResult(query=query.strip())
    return render(request, 'content/search.html', {'result': result, 'query': result.query})
