import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="IndustryInsight",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("industry", models.CharField(max_length=255, unique=True)),
                ("salary_ranges", models.JSONField(blank=True, default=list, help_text="List of {role, min, max, median, location}")),
                ("growth_rate", models.FloatField(default=0.0)),
                ("demand_level", models.CharField(choices=[("HIGH", "High"), ("MEDIUM", "Medium"), ("LOW", "Low")], max_length=10)),
                ("top_skills", models.JSONField(blank=True, default=list)),
                ("market_outlook", models.CharField(choices=[("POSITIVE", "Positive"), ("NEUTRAL", "Neutral"), ("NEGATIVE", "Negative")], default="NEUTRAL", max_length=10)),
                ("key_trends", models.JSONField(blank=True, default=list)),
                ("recommended_skills", models.JSONField(blank=True, default=list)),
                ("last_updated", models.DateTimeField(auto_now=True)),
                ("next_update", models.DateTimeField(db_index=True)),
            ],
            options={
                "ordering": ("industry",),
            },
        ),
        migrations.CreateModel(
            name="UserProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("external_id", models.CharField(max_length=255, unique=True)),
                ("email", models.EmailField(max_length=255)),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                ("image_url", models.URLField(blank=True, default="", max_length=1024)),
                ("industry", models.CharField(blank=True, db_index=True, max_length=255, null=True)),
                ("experience", models.PositiveIntegerField(blank=True, null=True)),
                ("bio", models.TextField(blank=True, null=True)),
                ("skills", models.JSONField(blank=True, default=list, help_text="List of skill labels")),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Resume",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("content", models.TextField(blank=True, default="")),
                ("ats_score", models.FloatField(blank=True, null=True)),
                ("feedback", models.TextField(blank=True, null=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="resume", to="coach.userprofile")),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="CoverLetter",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("content", models.TextField()),
                ("job_description", models.TextField(blank=True, default="")),
                ("company_name", models.CharField(max_length=255)),
                ("job_title", models.CharField(max_length=255)),
                ("status", models.CharField(choices=[("draft", "Draft"), ("completed", "Completed")], db_index=True, default="draft", max_length=20)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="cover_letters", to="coach.userprofile")),
            ],
            options={
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["user", "created_at"], name="coach_cover_user_created_idx")],
            },
        ),
    ]
