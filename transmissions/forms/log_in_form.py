from django import forms


class MagicLinkForm(forms.Form):
    """Email address to send a one-time Firebase sign-in link to."""

    email = forms.EmailField(
        label="Email",
        widget=forms.EmailInput(attrs={'placeholder': 'email for magic link'}),
        error_messages={'required': 'Enter an email first.'},
    )
