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
            name="FundingSource",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "type",
                    models.CharField(choices=[("bank", "Bank account"), ("card", "Card")], default="bank", max_length=10),
                ),
                ("provider_id", models.CharField(blank=True, max_length=64, null=True)),
                (
                    "provider_token",
                    models.CharField(
                        blank=True,
                        help_text="Opaque provider token, never raw account numbers",
                        max_length=128,
                        null=True,
                    ),
                ),
                ("institution_name", models.CharField(blank=True, max_length=100)),
                ("last4", models.CharField(max_length=4)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("inactive", "Inactive")], default="active", max_length=10
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="funding_sources",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["user", "status"], name="payment_fs_user_status_idx")],
            },
        ),
    ]
