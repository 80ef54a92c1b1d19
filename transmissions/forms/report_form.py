from django import forms
from transmissions.models import Report
from transmissions.utils import normalize_handle


class ReportForm(forms.Form):
    """Form to submit a new transmission about a player handle."""

    handle = forms.CharField(
        max_length=100,
        widget=forms.TextInput(attrs={'placeholder': 'player handle', 'autocomplete': 'off'}),
    )
    platform = forms.CharField(
        max_length=50,
        required=False,
        widget=forms.TextInput(attrs={'placeholder': 'platform (optional)'}),
    )
    sentiment = forms.ChoiceField(
        choices=Report.SENTIMENT_CHOICES,
        initial='neutral',
        help_text="How the interaction felt.",
    )
    severity = forms.ChoiceField(
        choices=Report.SEVERITY_CHOICES,
        initial='info',
        label="Risk level",
        help_text="How serious this is for others.",
    )
    encounter = forms.ChoiceField(
        choices=Report.ENCOUNTER_CHOICES,
        initial='other',
        help_text="Where it happened.",
    )
    category = forms.CharField(
        max_length=64,
        required=False,
        initial=Report.DEFAULT_CATEGORY,
        help_text="Short tag (e.g., comms, griefing).",
        widget=forms.TextInput(attrs={'placeholder': Report.DEFAULT_CATEGORY}),
    )
    description = forms.CharField(
        max_length=4000,
        widget=forms.Textarea(attrs={'rows': 5, 'placeholder': 'describe the interaction...'}),
        error_messages={'required': 'Description is required.'},
    )

    def clean_handle(self):
        """Reject handles that are only separators (they normalise to nothing)."""
        handle = self.cleaned_data["handle"].strip()
        if not normalize_handle(handle):
            raise forms.ValidationError("Handle is required.")
        return handle
