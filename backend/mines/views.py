# mines/views.py
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .exceptions import InvalidInput
from .serializers import PlaceBetIn, LossIn, CashOutIn
from .services import MinesResult, place_mines_bet, resolve_mines_loss, cash_out_mines


def _respond(result: MinesResult):
    return Response(result.as_dict(), status=result.status_code)


def _invalid_payload():
    return _respond(MinesResult.failure(InvalidInput()))


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def place_bet(request):
    serializer = PlaceBetIn(data=request.data)
    if not serializer.is_valid():
        return _invalid_payload()

    data = serializer.validated_data
    result = place_mines_bet(str(request.user.pk), data["bet_amount"], data["mine_count"])
    return _respond(result)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def resolve_loss(request):
    serializer = LossIn(data=request.data)
    if not serializer.is_valid():
        return _invalid_payload()

    result = resolve_mines_loss(str(request.user.pk), serializer.validated_data["penalty_amount"])
    return _respond(result)


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def cash_out(request):
    serializer = CashOutIn(data=request.data)
    if not serializer.is_valid():
        return _invalid_payload()

    data = serializer.validated_data
    result = cash_out_mines(str(request.user.pk), data["bet_amount"], data["winnings"])
    return _respond(result)
