# mines/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from django.db import DatabaseError, transaction

from engine.grid import generate_mines_grid
from engine.wallet import (
    AMOUNT_PLACES,
    MAX_AMOUNT,
    BalanceOverflow,
    MissingAccount,
    debit_wallet,
    credit_wallet,
    lock_account,
    record_transaction,
)
from wallets.models import GameTransaction

from .defaults import GRID_SIZE, MIN_MINES, MAX_MINES
from .exceptions import (
    MinesError,
    InvalidInput,
    AccountNotFound,
    InsufficientBalance,
    InvalidWinnings,
    StoreFailure,
)

logger = logging.getLogger(__name__)


@dataclass
class MinesResult:
    success: bool
    grid: Optional[List[int]] = None
    error: Optional[str] = None
    code: Optional[str] = None
    status_code: int = 200

    @classmethod
    def ok(cls, grid=None) -> "MinesResult":
        return cls(success=True, grid=grid)

    @classmethod
    def failure(cls, exc: MinesError) -> "MinesResult":
        return cls(success=False, error=exc.message, code=exc.code, status_code=exc.status_code)

    def as_dict(self) -> dict:
        data = {"success": self.success}
        if self.grid is not None:
            data["grid"] = self.grid
        if self.error is not None:
            data["error"] = self.error
            data["code"] = self.code
        return data


def _to_amount(value, message: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInput(message)
    if not amount.is_finite():
        raise InvalidInput(message)
    # must fit the ledger columns exactly, no rounding on insert
    if amount.as_tuple().exponent < -AMOUNT_PLACES or abs(amount) > MAX_AMOUNT:
        raise InvalidInput(message)
    return amount


def _to_mine_count(value) -> int:
    if isinstance(value, bool):
        raise InvalidInput("El número de minas no es válido.")
    try:
        count = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInput("El número de minas no es válido.")
    if not count.is_finite() or count != count.to_integral_value():
        raise InvalidInput("El número de minas no es válido.")
    count = int(count)
    if count < MIN_MINES or count > MAX_MINES:
        raise InvalidInput("El número de minas no es válido.")
    return count


def _require_user(user_id, message: str) -> None:
    if not user_id:
        raise InvalidInput(message)


# =====================================================
# PLACE BET
# =====================================================

def place_mines_bet(user_id, bet_amount, mine_count) -> MinesResult:
    """
    Check the player can cover the bet, deal a fresh minefield and log the bet.

    The balance is only checked here, never debited: the loss penalty or the
    cash-out settles the round later. The bet record is written after the
    check commits, so a failed insert leaves no balance change behind.
    """
    try:
        _require_user(user_id, "Debes iniciar sesión para realizar una apuesta.")
        bet_amount = _to_amount(bet_amount, "El monto de la apuesta debe ser mayor que cero.")
        if bet_amount <= 0:
            raise InvalidInput("El monto de la apuesta debe ser mayor que cero.")
        mine_count = _to_mine_count(mine_count)

        with transaction.atomic():
            try:
                account = lock_account(user_id)
            except MissingAccount:
                raise AccountNotFound("No se encontró el perfil de usuario.")
            if account.balance < bet_amount:
                raise InsufficientBalance()

        grid = generate_mines_grid(GRID_SIZE, mine_count)

        record_transaction(
            user_id,
            GameTransaction.DEBIT_BET_PLACED,
            bet_amount,
            details={"mine_count": mine_count},
        )
    except MinesError as exc:
        logger.warning(f"Mines bet rejected for {user_id}: {exc.code}")
        return MinesResult.failure(exc)
    except (DatabaseError, InvalidOperation):
        logger.exception(f"Error placing mines bet for {user_id}")
        return MinesResult.failure(StoreFailure("No se pudo procesar tu apuesta. Inténtalo de nuevo."))

    logger.info(f"Mines bet placed: user={user_id} amount={bet_amount} mines={mine_count}")
    return MinesResult.ok(grid=grid)


# =====================================================
# LOSS PENALTY
# =====================================================

def resolve_mines_loss(user_id, penalty_amount) -> MinesResult:
    """
    Debit the loss penalty. The balance is not checked and may go negative.
    """
    try:
        _require_user(user_id, "Usuario no autenticado.")
        penalty_amount = _to_amount(penalty_amount, "El monto de la penalización no es válido.")
        if penalty_amount <= 0:
            return MinesResult.ok()

        try:
            debit_wallet(user_id, penalty_amount, GameTransaction.DEBIT_LOSS_PENALTY)
        except MissingAccount:
            raise AccountNotFound("No se encontró el perfil de usuario para procesar la pérdida.")
        except BalanceOverflow:
            raise StoreFailure("No se pudo aplicar la penalización por pérdida.")
    except MinesError as exc:
        logger.warning(f"Mines loss rejected for {user_id}: {exc.code}")
        return MinesResult.failure(exc)
    except (DatabaseError, InvalidOperation):
        logger.exception(f"Error applying mines loss penalty for {user_id}")
        return MinesResult.failure(StoreFailure("No se pudo aplicar la penalización por pérdida."))

    logger.info(f"Mines loss applied: user={user_id} penalty={penalty_amount}")
    return MinesResult.ok()


# =====================================================
# CASH OUT
# =====================================================

def cash_out_mines(user_id, bet_amount, winnings) -> MinesResult:
    """
    Credit winnings minus the original bet.

    There is no existence read before the increment; a missing account makes
    the increment fail and the whole transaction rolls back.
    """
    try:
        _require_user(user_id, "Usuario no autenticado.")
        bet_amount = _to_amount(bet_amount, "El monto de la apuesta no es válido.")
        if bet_amount <= 0:
            raise InvalidInput("El monto de la apuesta no es válido.")
        winnings = _to_amount(winnings, "Las ganancias deben ser mayores a la apuesta inicial.")
        if winnings <= bet_amount:
            raise InvalidWinnings()

        net_winnings = winnings - bet_amount
        try:
            credit_wallet(
                user_id,
                net_winnings,
                GameTransaction.CREDIT_WIN,
                details={"bet_amount": str(bet_amount), "total_payout": str(winnings)},
            )
        except (MissingAccount, BalanceOverflow):
            raise StoreFailure("No se pudieron acreditar tus ganancias.")
    except MinesError as exc:
        logger.warning(f"Mines cash-out rejected for {user_id}: {exc.code}")
        return MinesResult.failure(exc)
    except (DatabaseError, InvalidOperation):
        logger.exception(f"Error cashing out mines for {user_id}")
        return MinesResult.failure(StoreFailure("No se pudieron acreditar tus ganancias."))

    logger.info(f"Mines cash-out: user={user_id} net={net_winnings} payout={winnings}")
    return MinesResult.ok()
