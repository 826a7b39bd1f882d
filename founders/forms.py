from decimal import Decimal

from django import forms
from .models import FounderApplication


class FounderApplicationForm(forms.ModelForm):
    desired_crowd_raise = forms.DecimalField(max_digits=14, decimal_places=2, min_value=Decimal("0.01"))

    class Meta:
        model = FounderApplication
        fields = [
            "company_name",
            "website",
            "logo_url",
            "contact_name",
            "contact_email",
            "stage",
            "description",
            "desired_crowd_raise",
            "existing_investors",
        ]
        labels = {
            "description": "Tell us about your company",
        }
        widgets = {
            "description": forms.Textarea(attrs={"rows": 4}),
            "existing_investors": forms.Textarea(attrs={"rows": 2}),
        }


class ApplicationReviewForm(forms.ModelForm):
    class Meta:
        model = FounderApplication
        fields = ["status", "notes"]
