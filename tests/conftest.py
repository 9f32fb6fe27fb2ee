from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from wallets.models import Account


@pytest.fixture
def make_account(db):
    def _make(user_id="player-1", balance="10.00"):
        return Account.objects.create(user_id=user_id, balance=Decimal(balance))
    return _make


@pytest.fixture
def player(django_user_model):
    return django_user_model.objects.create_user(username="player", password="not-a-real-pass")


@pytest.fixture
def api_client(player):
    client = APIClient()
    client.force_authenticate(user=player)
    return client
