from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect, render
from transmissions.exceptions import StoreError, ValidationError
from transmissions.forms import ReportForm
from transmissions.services import ReportingService

__all__ = ["new_report"]


@login_required
def new_report(request):
    """Display and process the new-transmission form."""
    if request.method == 'POST':
        redirect_response, form = _handle_report_post(request)
        if redirect_response:
            return redirect_response
    else:
        form = ReportForm()

    return render(request, 'content/new_report.html', {'form': form})


def _handle_report_post(request):
    """Process POST to create a report; return (redirect_response, form)."""
    form = ReportForm(request.POST)
    if not form.is_valid():
        return None, form

    try:
        ReportingService().submit_transmission(request.user, **form.cleaned_data)
    except ValidationError as e:
        form.add_error(None, e.message)
        return None, form
    except StoreError as e:
        messages.error(request, e.message)
        return None, form

    messages.success(request, "Transmission submitted.")
    return redirect('new_report'), form
