from rest_framework import serializers
from .models import Account, GameTransaction


class GameTransactionSerializer(serializers.ModelSerializer):
    class Meta:
        model = GameTransaction
        fields = ['id', 'game', 'tx_type', 'amount', 'details', 'created_at']


class AccountSerializer(serializers.ModelSerializer):
    class Meta:
        model = Account
        fields = ['user_id', 'balance', 'updated_at']
