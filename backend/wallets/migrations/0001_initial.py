from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Account",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=128, unique=True)),
                ("balance", models.DecimalField(decimal_places=2, default=0, max_digits=18)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name="GameTransaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("user_id", models.CharField(max_length=128)),
                ("game", models.CharField(default="Mines", max_length=32)),
                (
                    "tx_type",
                    models.CharField(
                        choices=[
                            ("debit_bet_placed", "Bet placed"),
                            ("debit_loss_penalty", "Loss penalty"),
                            ("credit_win", "Win"),
                        ],
                        max_length=32,
                    ),
                ),
                ("amount", models.DecimalField(decimal_places=2, max_digits=18)),
                ("details", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["user_id", "created_at"], name="gametx_user_created_idx")],
            },
        ),
    ]
