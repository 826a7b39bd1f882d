import uuid
from decimal import Decimal

from django.db import models
from django.conf import settings
from django.db.models import Sum
from django.urls import reverse
from django.utils.text import slugify

User = settings.AUTH_USER_MODEL


class Campaign(models.Model):
    STATUS_DRAFT = "draft"
    STATUS_LIVE = "live"
    STATUS_PAUSED = "paused"
    STATUS_CLOSED = "closed"
    STATUS_CHOICES = [
        (STATUS_DRAFT, "Draft"),
        (STATUS_LIVE, "Live"),
        (STATUS_PAUSED, "Paused"),
        (STATUS_CLOSED, "Closed"),
    ]

    company_name = models.CharField(max_length=150)
    tagline = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)
    logo_url = models.CharField(max_length=500, blank=True)
    cover_image_url = models.CharField(max_length=500, blank=True)
    founder_name = models.CharField(max_length=150, blank=True)
    founder_bio = models.TextField(blank=True)
    problem = models.TextField(blank=True)
    solution = models.TextField(blank=True)
    traction = models.TextField(blank=True)
    min_investment = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("50.00"))
    max_investment_per_person = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("1000.00"))
    target_amount = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("100000.00"))
    amount_raised = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0.00"))  # raised outside the platform
    crowd_percentage = models.DecimalField(max_digits=5, decimal_places=2, default=Decimal("5.00"))
    status = models.CharField(max_length=10, choices=STATUS_CHOICES, default=STATUS_DRAFT)
    partner_type = models.CharField(max_length=50, blank=True)
    partner_campaign_id = models.CharField(max_length=100, blank=True)
    partner_url = models.URLField(blank=True)
    slug = models.SlugField(max_length=160, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.company_name

    def get_absolute_url(self):
        return reverse("investment:campaign_detail", args=[self.slug])

    @property
    def is_live(self):
        return self.status == self.STATUS_LIVE

    def committed_amount(self, user=None):
        """Sum of every intent that has not failed, optionally for one user."""
        qs = self.investment_intents.exclude(status=InvestmentIntent.STATUS_FAILED)
        if user is not None:
            qs = qs.filter(user=user)
        return qs.aggregate(total=Sum("amount"))["total"] or Decimal("0.00")

    def total_raised(self):
        return self.amount_raised + self.committed_amount()

    def progress_percent(self):
        if not self.target_amount:
            return 0
        percent = round(self.total_raised() / self.target_amount * 100)
        return min(int(percent), 100)

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(self.company_name)
        super().save(*args, **kwargs)


def unique_slug(company_name):
    base = slugify(company_name) or "campaign"
    slug = base
    n = 2
    while Campaign.objects.filter(slug=slug).exists():
        slug = f"{base}-{n}"
        n += 1
    return slug


class InvestmentIntent(models.Model):
    STATUS_INITIATED = "initiated"
    STATUS_PROCESSING = "processing"
    STATUS_CONFIRMED = "confirmed"
    STATUS_FAILED = "failed"
    STATUS_CHOICES = [
        (STATUS_INITIATED, "Initiated"),
        (STATUS_PROCESSING, "Processing"),
        (STATUS_CONFIRMED, "Confirmed"),
        (STATUS_FAILED, "Failed"),
    ]
    TERMINAL_STATUSES = (STATUS_CONFIRMED, STATUS_FAILED)

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='investment_intents')
    campaign = models.ForeignKey(Campaign, on_delete=models.PROTECT, related_name='investment_intents')
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=12, choices=STATUS_CHOICES, default=STATUS_INITIATED)
    partner_tx_id = models.CharField(max_length=128, blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Investment Intent"
        verbose_name_plural = "Investment Intents"
        ordering = ['-created_at']
        indexes = [models.Index(fields=["campaign", "status"], name="invest_campaign_status_idx")]

    def __str__(self):
        return f"{self.user} - {self.campaign} ${self.amount} ({self.status})"

    @property
    def is_terminal(self):
        return self.status in self.TERMINAL_STATUSES
