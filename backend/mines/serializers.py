# mines/serializers.py
from rest_framework import serializers


class PlaceBetIn(serializers.Serializer):
    bet_amount = serializers.DecimalField(max_digits=18, decimal_places=2)
    mine_count = serializers.IntegerField()


class LossIn(serializers.Serializer):
    penalty_amount = serializers.DecimalField(max_digits=18, decimal_places=2)


class CashOutIn(serializers.Serializer):
    bet_amount = serializers.DecimalField(max_digits=18, decimal_places=2)
    winnings = serializers.DecimalField(max_digits=18, decimal_places=2)
