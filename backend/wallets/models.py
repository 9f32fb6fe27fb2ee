from django.db import models


class ImmutableRecordError(Exception):
    pass


class Account(models.Model):
    user_id = models.CharField(max_length=128, unique=True)
    balance = models.DecimalField(max_digits=18, decimal_places=2, default=0)

    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Account({self.user_id})"


class GameTransactionQuerySet(models.QuerySet):
    def update(self, **kwargs):
        raise ImmutableRecordError("Game transactions are append-only")

    def delete(self):
        raise ImmutableRecordError("Game transactions are append-only")


class GameTransaction(models.Model):
    """
    Append-only audit record of a balance operation.
    Rows are written once and never updated or deleted.
    """

    GAME_MINES = "Mines"

    DEBIT_BET_PLACED = "debit_bet_placed"
    DEBIT_LOSS_PENALTY = "debit_loss_penalty"
    CREDIT_WIN = "credit_win"
    TX_TYPE_CHOICES = [
        (DEBIT_BET_PLACED, "Bet placed"),
        (DEBIT_LOSS_PENALTY, "Loss penalty"),
        (CREDIT_WIN, "Win"),
    ]

    user_id = models.CharField(max_length=128)
    game = models.CharField(max_length=32, default=GAME_MINES)
    tx_type = models.CharField(max_length=32, choices=TX_TYPE_CHOICES)
    amount = models.DecimalField(max_digits=18, decimal_places=2)
    details = models.JSONField(default=dict, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = GameTransactionQuerySet.as_manager()

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["user_id", "created_at"], name="gametx_user_created_idx"),
        ]

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ImmutableRecordError("Game transactions are append-only")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ImmutableRecordError("Game transactions are append-only")

    def __str__(self):
        return f"{self.tx_type} {self.amount} for {self.user_id}"
