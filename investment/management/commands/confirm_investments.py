# investment/management/commands/confirm_investments.py
from django.core.management.base import BaseCommand
from django.utils import timezone

from investment.models import InvestmentIntent
from investment.services import refresh_investment_status


class Command(BaseCommand):
    help = "Settle processing sandbox investments whose confirmation delay has passed."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Only report how many investments are still processing.",
        )

    def handle(self, *args, **options):
        pending = InvestmentIntent.objects.filter(status=InvestmentIntent.STATUS_PROCESSING).order_by("created_at")
        if options["dry_run"]:
            self.stdout.write(f"{pending.count()} investment(s) processing")
            return

        now = timezone.now()
        confirmed = 0
        for intent in pending:
            if refresh_investment_status(intent, now=now):
                confirmed += 1
                self.stdout.write(f"Confirmed investment {intent.id} ({intent.partner_tx_id}) for user {intent.user_id}")

        self.stdout.write(self.style.SUCCESS(f"Confirmed {confirmed} investment(s)."))
