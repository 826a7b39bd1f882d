# kyc/signals.py
import logging

from django.db.models.signals import post_save
from django.dispatch import receiver
from .models import KYCVerification

logger = logging.getLogger(__name__)


@receiver(post_save, sender=KYCVerification)
def sync_user_kyc_status(sender, instance: KYCVerification, **kwargs):
    """The account's kyc_status always mirrors its latest submission."""
    user = instance.user
    if user.kyc_status == instance.status:
        return
    user.kyc_status = instance.status
    user.save(update_fields=["kyc_status", "updated_at"])
    logger.info("Identity status for user %s is now %s", user.pk, instance.status)
