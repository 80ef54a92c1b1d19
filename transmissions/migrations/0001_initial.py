import django.contrib.auth.models
import django.db.models.deletion
import django.utils.timezone
import uuid
from django.conf import settings
from django.db import migrations, models

class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("username", models.CharField(max_length=150, unique=True)),
                ("email", models.EmailField(max_length=254, unique=True)),
                ("firebase_uid", models.CharField(blank=True, help_text="Firebase Auth uid this account is linked to", max_length=128, null=True, unique=True)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "ordering": ["email"],
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Handle",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("display", models.CharField(max_length=100)),
                ("canonical_key", models.CharField(max_length=100, unique=True)),
                ("platform", models.CharField(blank=True, max_length=50, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "handle",
                "ordering": ["display"],
            },
        ),
        migrations.CreateModel(
            name="Report",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("sentiment", models.CharField(choices=[("good", "good"), ("neutral", "neutral"), ("bad", "bad"), ("rat", "rat")], default="neutral", max_length=16)),
                ("severity", models.CharField(choices=[("info", "FYI"), ("warning", "Caution"), ("critical", "High Risk")], default="info", max_length=16)),
                ("encounter", models.CharField(choices=[("spawn_in", "spawn in"), ("objective", "objective"), ("extraction", "extraction"), ("third_party", "third party"), ("comms", "comms"), ("other", "other")], default="other", max_length=16)),
                ("category", models.CharField(blank=True, default="general", max_length=64)),
                ("description", models.TextField(max_length=4000)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("hidden", models.BooleanField(default=False, help_text="Hidden by moderation or repeated flags")),
                ("handle", models.ForeignKey(db_column="handle_id", on_delete=django.db.models.deletion.PROTECT, related_name="reports", to="transmissions.handle")),
                ("reporter", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="submitted_reports", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "report",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Flag",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("report", models.ForeignKey(db_column="report_id", on_delete=django.db.models.deletion.CASCADE, related_name="flags", to="transmissions.report")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="flags", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "report_flag",
            },
        ),
        migrations.AddConstraint(
            model_name="flag",
            constraint=models.UniqueConstraint(fields=("report", "user"), name="uniq_flag_report_user"),
        ),
        migrations.CreateModel(
            name="Dispute",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("message", models.TextField(max_length=2000)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("report", models.ForeignKey(db_column="report_id", on_delete=django.db.models.deletion.CASCADE, related_name="disputes", to="transmissions.report")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="disputes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "report_dispute",
                "ordering": ["-created_at"],
            },
        ),
    ]
