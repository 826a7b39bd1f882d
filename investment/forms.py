from decimal import Decimal

from django import forms
from .models import Campaign

AMOUNT_PRESETS = (50, 100, 250, 500)


class InvestForm(forms.Form):
    amount = forms.DecimalField(max_digits=12, decimal_places=2, min_value=Decimal("0.01"))


class CampaignForm(forms.ModelForm):
    class Meta:
        model = Campaign
        fields = [
            "company_name",
            "tagline",
            "description",
            "founder_name",
            "founder_bio",
            "problem",
            "solution",
            "traction",
            "logo_url",
            "cover_image_url",
            "min_investment",
            "max_investment_per_person",
            "target_amount",
            "amount_raised",
            "crowd_percentage",
            "status",
            "partner_type",
            "partner_campaign_id",
            "partner_url",
        ]
        widgets = {
            "description": forms.Textarea(attrs={"rows": 4}),
            "founder_bio": forms.Textarea(attrs={"rows": 3}),
            "problem": forms.Textarea(attrs={"rows": 3}),
            "solution": forms.Textarea(attrs={"rows": 3}),
            "traction": forms.Textarea(attrs={"rows": 2}),
        }

    def clean(self):
        cleaned = super().clean()
        min_investment = cleaned.get("min_investment")
        max_per_person = cleaned.get("max_investment_per_person")
        target = cleaned.get("target_amount")
        raised = cleaned.get("amount_raised")
        crowd = cleaned.get("crowd_percentage")

        for field in ("min_investment", "max_investment_per_person", "target_amount"):
            value = cleaned.get(field)
            if value is not None and value <= 0:
                self.add_error(field, "Must be greater than zero.")
        if raised is not None and raised < 0:
            self.add_error("amount_raised", "Cannot be negative.")
        if crowd is not None and not (0 <= crowd <= 100):
            self.add_error("crowd_percentage", "Must be between 0 and 100.")

        if min_investment and max_per_person and min_investment > max_per_person:
            self.add_error("max_investment_per_person", "Maximum per person must be at least the minimum investment.")
        if max_per_person and target and max_per_person > target:
            self.add_error("max_investment_per_person", "Maximum per person cannot exceed the target amount.")
        return cleaned
