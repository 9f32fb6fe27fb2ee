from rest_framework import status


class MinesError(Exception):
    code = "store_failure"
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_message = "No se pudo procesar la operación. Inténtalo de nuevo."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(MinesError):
    code = "invalid_input"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Los datos de la jugada no son válidos."


class AccountNotFound(MinesError):
    code = "account_not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "No se encontró el perfil de usuario."


class InsufficientBalance(MinesError):
    code = "insufficient_balance"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Saldo insuficiente para realizar esta apuesta."


class InvalidWinnings(MinesError):
    code = "invalid_winnings"
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Las ganancias deben ser mayores a la apuesta inicial."


class StoreFailure(MinesError):
    pass
