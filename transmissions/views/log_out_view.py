from django.contrib import messages
from django.contrib.auth import logout
from django.shortcuts import redirect

__all__ = ["log_out"]


def log_out(request):
    """Log out the current user and redirect to the feed."""
    logout(request)
    messages.info(request, "Signed out.")
    return redirect('home')
