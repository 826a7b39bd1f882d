from django.db import models
from django.contrib.auth import get_user_model
from django.utils import timezone

User = get_user_model()


class KYCVerification(models.Model):
    STATUS_PENDING = "pending"
    STATUS_VERIFIED = "verified"
    STATUS_FAILED = "failed"
    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_VERIFIED, "Verified"),
        (STATUS_FAILED, "Failed"),
    ]

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="kyc")
    full_name = models.CharField(max_length=150)
    date_of_birth = models.DateField()
    address = models.CharField(max_length=255)
    citizenship = models.CharField(max_length=64)
    ssn_last4 = models.CharField(max_length=4)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING)
    submitted_at = models.DateTimeField(auto_now_add=True)
    reviewed_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        verbose_name = "KYC Verification"
        verbose_name_plural = "KYC Verifications"

    def __str__(self):
        return f"KYC - {self.user.email} ({self.get_status_display()})"

    @property
    def verified(self):
        return self.status == self.STATUS_VERIFIED

    def mark(self, status):
        self.status = status
        self.reviewed_at = timezone.now()
        self.save(update_fields=["status", "reviewed_at"])
