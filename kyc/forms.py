from datetime import date

from django import forms
from django.conf import settings
from django.core.validators import RegexValidator
from .models import KYCVerification


def years_between(born, today):
    return today.year - born.year - ((today.month, today.day) < (born.month, born.day))


class KYCForm(forms.ModelForm):
    ssn_last4 = forms.CharField(
        label="Last 4 of SSN",
        max_length=4,
        validators=[RegexValidator(r"^\d{4}$", "Enter last 4 digits")],
        widget=forms.TextInput(attrs={"class": "form-control", "inputmode": "numeric"}),
    )

    class Meta:
        model = KYCVerification
        fields = ["full_name", "date_of_birth", "address", "citizenship", "ssn_last4"]
        labels = {
            "full_name": "Legal name",
            "citizenship": "Country of citizenship",
        }
        widgets = {
            "full_name": forms.TextInput(attrs={"class": "form-control"}),
            "date_of_birth": forms.DateInput(attrs={"class": "form-control", "type": "date"}),
            "address": forms.TextInput(attrs={"class": "form-control"}),
            "citizenship": forms.TextInput(attrs={"class": "form-control"}),
        }
        error_messages = {
            "full_name": {"required": "Legal name is required"},
            "date_of_birth": {"required": "Date of birth is required"},
            "address": {"required": "Address is required"},
            "citizenship": {"required": "Country of citizenship is required"},
        }

    def clean_full_name(self):
        name = self.cleaned_data["full_name"].strip()
        if not name:
            raise forms.ValidationError("Legal name is required")
        return name

    def clean_address(self):
        address = self.cleaned_data["address"].strip()
        if len(address) < 5:
            raise forms.ValidationError("Address is required")
        return address

    def clean_date_of_birth(self):
        dob = self.cleaned_data["date_of_birth"]
        today = date.today()
        if dob > today:
            raise forms.ValidationError("Date of birth cannot be in the future")
        if years_between(dob, today) < settings.KYC_MINIMUM_AGE:
            raise forms.ValidationError(f"You must be at least {settings.KYC_MINIMUM_AGE} years old to invest.")
        return dob
