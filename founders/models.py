from django.db import models


class FounderApplication(models.Model):
    STAGE_CHOICES = [
        ("pre-seed", "Pre-seed"),
        ("seed", "Seed"),
        ("series-a", "Series A"),
        ("other", "Other"),
    ]

    STATUS_NEW = "new"
    STATUS_IN_REVIEW = "in_review"
    STATUS_APPROVED = "approved"
    STATUS_REJECTED = "rejected"
    STATUS_CHOICES = [
        (STATUS_NEW, "New"),
        (STATUS_IN_REVIEW, "In review"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_REJECTED, "Rejected"),
    ]

    company_name = models.CharField(max_length=150)
    website = models.URLField(blank=True)
    logo_url = models.URLField(blank=True)
    contact_name = models.CharField(max_length=150)
    contact_email = models.EmailField()
    stage = models.CharField(max_length=16, choices=STAGE_CHOICES)
    description = models.TextField()
    desired_crowd_raise = models.DecimalField(max_digits=14, decimal_places=2)
    existing_investors = models.TextField(blank=True)
    status = models.CharField(max_length=16, choices=STATUS_CHOICES, default=STATUS_NEW)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.company_name} ({self.get_status_display()})"
