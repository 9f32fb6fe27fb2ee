import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from engine.wallet import get_account, recent_transactions
from .serializers import AccountSerializer, GameTransactionSerializer

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 20
MAX_HISTORY_LIMIT = 100


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def wallet_balance(request):
    account = get_account(str(request.user.pk))
    if account is None:
        return Response(
            {"detail": "No se encontró el perfil de usuario."},
            status=status.HTTP_404_NOT_FOUND,
        )
    return Response(AccountSerializer(account).data)


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def wallet_transactions(request):
    try:
        limit = int(request.query_params.get("limit", DEFAULT_HISTORY_LIMIT))
    except ValueError:
        return Response({"detail": "Invalid limit"}, status=status.HTTP_400_BAD_REQUEST)

    limit = max(1, min(limit, MAX_HISTORY_LIMIT))
    txs = recent_transactions(str(request.user.pk), limit=limit)
    logger.debug(f"Returning {len(txs)} ledger records for {request.user.pk}")
    return Response(GameTransactionSerializer(txs, many=True).data)
