from __future__ import annotations
from typing import Dict
from django.conf import settings
from django.http import HttpRequest


def session_identity(request: HttpRequest) -> Dict[str, object]:
  """Inject the signed-in email and avatar URL for the navbar."""
  user = getattr(request, "user", None)
  if not user or not user.is_authenticated:
    return {"signed_in_email": None}
  return {
    "signed_in_email": user.email,
    "navbar_avatar_url": user.mini_gravatar(),
  }


def site_links(request: HttpRequest) -> Dict[str, object]:
  """Links shown in the footer on every page."""
  return {
    "support_url": settings.SURFACELOG_SUPPORT_URL,
    "flag_hide_threshold": settings.SURFACELOG_FLAG_HIDE_THRESHOLD,
  }
