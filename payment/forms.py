from django import forms
from django.core.validators import RegexValidator
from .models import FundingSource


class FundingSourceForm(forms.Form):
    type = forms.ChoiceField(choices=FundingSource.TYPE_CHOICES, initial=FundingSource.TYPE_BANK)
    institution_name = forms.CharField(max_length=100, initial="Chase Bank")
    last4 = forms.CharField(
        label="Last 4 digits",
        max_length=4,
        validators=[RegexValidator(r"^\d{4}$", "Enter the last 4 digits")],
    )
