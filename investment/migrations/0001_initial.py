import uuid
from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Campaign",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("company_name", models.CharField(max_length=150)),
                ("tagline", models.CharField(blank=True, max_length=255)),
                ("description", models.TextField(blank=True)),
                ("logo_url", models.CharField(blank=True, max_length=500)),
                ("cover_image_url", models.CharField(blank=True, max_length=500)),
                ("founder_name", models.CharField(blank=True, max_length=150)),
                ("founder_bio", models.TextField(blank=True)),
                ("problem", models.TextField(blank=True)),
                ("solution", models.TextField(blank=True)),
                ("traction", models.TextField(blank=True)),
                ("min_investment", models.DecimalField(decimal_places=2, default=Decimal("50.00"), max_digits=12)),
                (
                    "max_investment_per_person",
                    models.DecimalField(decimal_places=2, default=Decimal("1000.00"), max_digits=12),
                ),
                ("target_amount", models.DecimalField(decimal_places=2, default=Decimal("100000.00"), max_digits=14)),
                ("amount_raised", models.DecimalField(decimal_places=2, default=Decimal("0.00"), max_digits=14)),
                ("crowd_percentage", models.DecimalField(decimal_places=2, default=Decimal("5.00"), max_digits=5)),
                (
                    "status",
                    models.CharField(
                        choices=[("draft", "Draft"), ("live", "Live"), ("paused", "Paused"), ("closed", "Closed")],
                        default="draft",
                        max_length=10,
                    ),
                ),
                ("partner_type", models.CharField(blank=True, max_length=50)),
                ("partner_campaign_id", models.CharField(blank=True, max_length=100)),
                ("partner_url", models.URLField(blank=True)),
                ("slug", models.SlugField(max_length=160, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
            },
        ),
        migrations.CreateModel(
            name="InvestmentIntent",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("initiated", "Initiated"),
                            ("processing", "Processing"),
                            ("confirmed", "Confirmed"),
                            ("failed", "Failed"),
                        ],
                        default="initiated",
                        max_length=12,
                    ),
                ),
                ("partner_tx_id", models.CharField(blank=True, max_length=128, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "campaign",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="investment_intents",
                        to="investment.campaign",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="investment_intents",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Investment Intent",
                "verbose_name_plural": "Investment Intents",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["campaign", "status"], name="invest_campaign_status_idx")],
            },
        ),
    ]
