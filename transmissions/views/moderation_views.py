from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST
from transmissions.exceptions import ConflictError, SurfaceLogError
from transmissions.forms import DisputeForm
from transmissions.models import Report
from transmissions.services import ModerationService
from transmissions.utils.http import is_ajax

__all__ = ["flag_report", "dispute_report"]


@login_required
@require_POST
def flag_report(request, report_id):
    """Flag a report once per user; duplicate flags are reported, not stored."""
    get_object_or_404(Report, id=report_id)
    try:
        ModerationService(request.user).flag(report_id)
    except ConflictError as e:
        return _flag_response(request, e.message, status=409, level=messages.WARNING)
    except SurfaceLogError as e:
        return _flag_response(request, f"Flag error: {e.message}", status=400, level=messages.ERROR)
    return _flag_response(request, "Post flagged for review.", status=201, level=messages.SUCCESS)


def _flag_response(request, message, *, status, level):
    if is_ajax(request):
        return JsonResponse({"detail": message, "flagged": status in (201, 409)}, status=status)
    messages.add_message(request, level, message)
    return _redirect_back(request)


@login_required
def dispute_report(request, report_id):
    """Request a correction to a report."""
    report = get_object_or_404(Report.objects.select_related("handle"), id=report_id)
    form = DisputeForm(request.POST or None)
    if request.method == 'POST' and form.is_valid():
        try:
            ModerationService(request.user).dispute(report_id, form.cleaned_data["message"])
        except SurfaceLogError as e:
            form.add_error(None, f"Dispute error: {e.message}")
        else:
            messages.success(request, "Dispute submitted. Thank you.")
            return _redirect_back(request)

    return render(request, 'content/dispute.html', {'form': form, 'report': report})


def _redirect_back(request):
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
        return redirect(next_url)
    return redirect('home')
