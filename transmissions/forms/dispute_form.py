from django import forms


class DisputeForm(forms.Form):
    """Free-text correction request against a report."""

    message = forms.CharField(
        max_length=2000,
        label="What's wrong with this post, and what should be corrected?",
        widget=forms.Textarea(attrs={'rows': 4}),
    )
