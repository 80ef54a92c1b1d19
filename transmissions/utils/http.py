"""Request inspection helpers shared by the moderation views."""

PARTIAL_REQUEST_HEADERS = ("HX-Request",)


def is_ajax(request):
    """True for fetch/XHR/HTMX calls that expect JSON back instead of a redirect."""
    if request.headers.get("x-requested-with") == "XMLHttpRequest":
        return True
    if any(request.headers.get(header) for header in PARTIAL_REQUEST_HEADERS):
        return True
    if "application/json" in request.headers.get("accept", ""):
        return True
    return request.GET.get("ajax") == "1"
