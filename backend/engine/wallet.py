from decimal import Decimal
from django.db import transaction
from django.db.models import F
from django.utils import timezone
from wallets.models import Account, GameTransaction


_BALANCE_FIELD = Account._meta.get_field("balance")

# Largest magnitude the balance and amount columns can hold.
AMOUNT_PLACES = _BALANCE_FIELD.decimal_places
MAX_AMOUNT = Decimal(10) ** (_BALANCE_FIELD.max_digits - AMOUNT_PLACES) - Decimal(10) ** -AMOUNT_PLACES


class MissingAccount(Exception):
    pass


class BalanceOverflow(Exception):
    pass


def get_account(user_id):
    return Account.objects.filter(user_id=user_id).first()


def lock_account(user_id):
    """
    Read the account row for update. Must run inside transaction.atomic().
    """
    try:
        return Account.objects.select_for_update().get(user_id=user_id)
    except Account.DoesNotExist:
        raise MissingAccount(user_id)


def increment_balance(user_id, delta: Decimal):
    """
    Add delta (negative to debit) to the stored balance without reading it first.
    The row must already exist and the result must fit the balance column.
    """
    if abs(delta) > MAX_AMOUNT:
        raise BalanceOverflow(user_id)
    if delta >= 0:
        qs = Account.objects.filter(user_id=user_id, balance__lte=MAX_AMOUNT - delta)
    else:
        qs = Account.objects.filter(user_id=user_id, balance__gte=-MAX_AMOUNT - delta)
    updated = qs.update(
        balance=F("balance") + delta,
        updated_at=timezone.now(),
    )
    if not updated:
        if not Account.objects.filter(user_id=user_id).exists():
            raise MissingAccount(user_id)
        raise BalanceOverflow(user_id)


def record_transaction(user_id, tx_type, amount: Decimal, details=None, game=GameTransaction.GAME_MINES):
    return GameTransaction.objects.create(
        user_id=user_id,
        game=game,
        tx_type=tx_type,
        amount=amount,
        details=details or {},
    )


@transaction.atomic
def debit_wallet(user_id, amount: Decimal, tx_type, details=None):
    lock_account(user_id)
    increment_balance(user_id, -amount)
    return record_transaction(user_id, tx_type, amount, details)


@transaction.atomic
def credit_wallet(user_id, amount: Decimal, tx_type, details=None):
    increment_balance(user_id, amount)
    return record_transaction(user_id, tx_type, amount, details)


def recent_transactions(user_id, limit=20, tx_type=None):
    qs = GameTransaction.objects.filter(user_id=user_id)
    if tx_type:
        qs = qs.filter(tx_type=tx_type)
    return list(qs.order_by("-created_at", "-id")[:limit])
