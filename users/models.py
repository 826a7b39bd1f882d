from django.db import models
from django.contrib.auth.models import AbstractBaseUser, PermissionsMixin
from django.utils import timezone
from .managers import CustomUserManager


class CustomUser(AbstractBaseUser, PermissionsMixin):
    KYC_PENDING = "pending"
    KYC_VERIFIED = "verified"
    KYC_FAILED = "failed"
    KYC_STATUS_CHOICES = [
        (KYC_PENDING, "Pending"),
        (KYC_VERIFIED, "Verified"),
        (KYC_FAILED, "Failed"),
    ]

    email = models.EmailField(unique=True)
    full_name = models.CharField(max_length=150, blank=True)
    kyc_status = models.CharField(max_length=16, choices=KYC_STATUS_CHOICES, default=KYC_PENDING)  # synced from kyc app
    terms_accepted = models.BooleanField(default=False)
    terms_accepted_at = models.DateTimeField(null=True, blank=True)
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    date_joined = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = []

    objects = CustomUserManager()

    def __str__(self):
        return self.email

    @property
    def kyc_verified(self):
        return self.kyc_status == self.KYC_VERIFIED

    @property
    def display_name(self):
        return self.full_name or self.email

    def accept_terms(self):
        self.terms_accepted = True
        self.terms_accepted_at = timezone.now()
        self.save(update_fields=["terms_accepted", "terms_accepted_at", "updated_at"])
