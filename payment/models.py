# payment/models.py
from django.conf import settings
from django.db import models

User = settings.AUTH_USER_MODEL


class FundingSource(models.Model):
    TYPE_BANK = "bank"
    TYPE_CARD = "card"
    TYPE_CHOICES = [
        (TYPE_BANK, "Bank account"),
        (TYPE_CARD, "Card"),
    ]

    STATUS_ACTIVE = "active"
    STATUS_INACTIVE = "inactive"
    STATUS_CHOICES = [
        (STATUS_ACTIVE, "Active"),
        (STATUS_INACTIVE, "Inactive"),
    ]

    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name="funding_sources")
    type = models.CharField(max_length=10, choices=TYPE_CHOICES, default=TYPE_BANK)
    provider_id = models.CharField(max_length=64, blank=True, null=True)
    provider_token = models.CharField(max_length=128, blank=True, null=True, help_text="Opaque provider token, never raw account numbers")
    institution_name = models.CharField(max_length=100, blank=True)
    last4 = models.CharField(max_length=4)
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [models.Index(fields=["user", "status"], name="payment_fs_user_status_idx")]

    def __str__(self):
        return f"{self.institution_name or self.get_type_display()} ••••{self.last4} ({self.status})"

    @property
    def is_active(self):
        return self.status == self.STATUS_ACTIVE

    @property
    def display(self):
        return f"{self.institution_name or self.get_type_display()} ••••{self.last4}"
