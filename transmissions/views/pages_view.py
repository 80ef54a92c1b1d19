from django.conf import settings
from django.shortcuts import render
from django.utils import timezone

__all__ = ["rules", "support"]


def rules(request):
    """Site rules, disclaimers and data policy."""
    return render(request, 'pages/rules.html', {'last_updated': timezone.localdate()})


def support(request):
    """Support page; ``?thanks=1`` shows the thank-you banner."""
    return render(request, 'pages/support.html', {
        'show_thanks': request.GET.get("thanks") == "1",
        'support_url': settings.SURFACELOG_SUPPORT_URL,
    })
