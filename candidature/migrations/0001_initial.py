import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Candidate",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("first_name", models.CharField(max_length=255, verbose_name="prénom")),
                ("last_name", models.CharField(max_length=255, verbose_name="nom")),
                ("email", models.EmailField(max_length=255, verbose_name="email")),
                ("phone", models.CharField(blank=True, max_length=255, null=True, verbose_name="téléphone")),
                ("has_experience", models.BooleanField(default=False, verbose_name="expérience")),
                (
                    "experience_details",
                    models.TextField(blank=True, null=True, verbose_name="détails de l'expérience"),
                ),
                (
                    "availability_date",
                    models.DateField(blank=True, null=True, verbose_name="date de disponibilité"),
                ),
                (
                    "is_immediately_available",
                    models.BooleanField(default=False, verbose_name="disponible immédiatement"),
                ),
                ("consent_rgpd", models.BooleanField(default=False, verbose_name="consentement RGPD")),
                (
                    "status",
                    models.CharField(
                        choices=[("draft", "Brouillon"), ("submitted", "Soumise")],
                        default="draft",
                        max_length=20,
                    ),
                ),
                ("submission_key", models.UUIDField(blank=True, editable=False, null=True, unique=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
    ]
