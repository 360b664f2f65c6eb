import uuid

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Notification",
            fields=[
                (
                    "notification_id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for the notification",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("message", models.TextField()),
                (
                    "severity",
                    models.CharField(
                        choices=[
                            ("Info", "Info"),
                            ("Warning", "Warning"),
                            ("Success", "Success"),
                        ],
                        default="Info",
                        max_length=10,
                    ),
                ),
                (
                    "sender_id",
                    models.CharField(
                        help_text="Opaque id of the sending user", max_length=64
                    ),
                ),
                (
                    "sender_role",
                    models.CharField(
                        choices=[
                            ("Admin", "Admin"),
                            ("Faculty", "Faculty"),
                            ("Student", "Student"),
                        ],
                        max_length=10,
                    ),
                ),
                (
                    "sender_name",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                (
                    "recipient_role",
                    models.CharField(
                        choices=[
                            ("Admin", "Admin"),
                            ("Faculty", "Faculty"),
                            ("Student", "Student"),
                        ],
                        max_length=10,
                    ),
                ),
                (
                    "recipient_key",
                    models.CharField(
                        help_text=(
                            "Recipient user id, or BROADCAST for every user "
                            "of the role"
                        ),
                        max_length=64,
                    ),
                ),
                ("is_read", models.BooleanField(default=False)),
                ("read_at", models.DateTimeField(blank=True, null=True)),
                (
                    "action_link",
                    models.CharField(blank=True, max_length=500, null=True),
                ),
                ("metadata", models.JSONField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "notifications",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["recipient_role", "recipient_key", "is_read"],
                        name="notif_recipient_read_idx",
                    ),
                    models.Index(fields=["sender_id"], name="notif_sender_idx"),
                    models.Index(fields=["-created_at"], name="notif_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="NotificationReadReceipt",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("reader_id", models.CharField(max_length=64)),
                (
                    "reader_role",
                    models.CharField(
                        choices=[
                            ("Admin", "Admin"),
                            ("Faculty", "Faculty"),
                            ("Student", "Student"),
                        ],
                        max_length=10,
                    ),
                ),
                ("read_at", models.DateTimeField()),
                (
                    "notification",
                    models.ForeignKey(
                        db_column="notification_id",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="receipts",
                        to="notifications.notification",
                    ),
                ),
            ],
            options={
                "db_table": "notification_read_receipts",
                "indexes": [
                    models.Index(fields=["reader_id"], name="receipt_reader_idx"),
                ],
                "unique_together": {("notification", "reader_id")},
            },
        ),
    ]
