"""HTTP tests for the mines and wallet endpoints."""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from wallets.models import Account, GameTransaction

pytestmark = pytest.mark.django_db


@pytest.fixture
def funded(player):
    return Account.objects.create(user_id=str(player.pk), balance=Decimal("50.00"))


def test_endpoints_require_login():
    client = APIClient()
    assert client.post("/api/mines/bet/", {"bet_amount": "5", "mine_count": 3}, format="json").status_code in (401, 403)
    assert client.get("/api/wallet/balance/").status_code in (401, 403)


def test_place_bet_returns_grid(api_client, funded):
    resp = api_client.post("/api/mines/bet/", {"bet_amount": "5.00", "mine_count": 3}, format="json")
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert len(body["grid"]) == 25
    assert sum(body["grid"]) == 3


def test_place_bet_insufficient_balance(api_client, funded):
    resp = api_client.post("/api/mines/bet/", {"bet_amount": "60", "mine_count": 3}, format="json")
    assert resp.status_code == 400
    assert resp.json()["code"] == "insufficient_balance"


def test_place_bet_without_account(api_client):
    resp = api_client.post("/api/mines/bet/", {"bet_amount": "1", "mine_count": 3}, format="json")
    assert resp.status_code == 404
    body = resp.json()
    assert set(body) == {"success", "error", "code"}
    assert body["code"] == "account_not_found"


def test_malformed_payload_is_invalid_input(api_client, funded):
    resp = api_client.post("/api/mines/bet/", {"bet_amount": "lots"}, format="json")
    assert resp.status_code == 400
    body = resp.json()
    assert body["success"] is False
    assert body["code"] == "invalid_input"


def test_loss_endpoint(api_client, funded):
    resp = api_client.post("/api/mines/loss/", {"penalty_amount": "7.50"}, format="json")
    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    funded.refresh_from_db()
    assert funded.balance == Decimal("42.50")


def test_cash_out_endpoint(api_client, funded):
    resp = api_client.post("/api/mines/cashout/", {"bet_amount": "10", "winnings": "25"}, format="json")
    assert resp.status_code == 200
    funded.refresh_from_db()
    assert funded.balance == Decimal("65.00")


def test_cash_out_without_profit(api_client, funded):
    resp = api_client.post("/api/mines/cashout/", {"bet_amount": "10", "winnings": "10"}, format="json")
    assert resp.status_code == 400
    assert resp.json()["code"] == "invalid_winnings"


def test_cash_out_without_account_is_store_failure(api_client):
    resp = api_client.post("/api/mines/cashout/", {"bet_amount": "10", "winnings": "25"}, format="json")
    assert resp.status_code == 503
    assert resp.json()["code"] == "store_failure"


def test_wallet_balance(api_client, funded, player):
    resp = api_client.get("/api/wallet/balance/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["user_id"] == str(player.pk)
    assert Decimal(body["balance"]) == Decimal("50.00")


def test_wallet_balance_missing(api_client):
    assert api_client.get("/api/wallet/balance/").status_code == 404


def test_wallet_transactions_newest_first(api_client, funded):
    api_client.post("/api/mines/bet/", {"bet_amount": "5", "mine_count": 2}, format="json")
    api_client.post("/api/mines/loss/", {"penalty_amount": "5"}, format="json")
    api_client.post("/api/mines/cashout/", {"bet_amount": "5", "winnings": "9"}, format="json")

    resp = api_client.get("/api/wallet/transactions/")
    assert resp.status_code == 200
    types = [row["tx_type"] for row in resp.json()]
    assert types == [
        GameTransaction.CREDIT_WIN,
        GameTransaction.DEBIT_LOSS_PENALTY,
        GameTransaction.DEBIT_BET_PLACED,
    ]

    resp = api_client.get("/api/wallet/transactions/?limit=1")
    assert len(resp.json()) == 1


def test_wallet_transactions_bad_limit(api_client):
    assert api_client.get("/api/wallet/transactions/?limit=abc").status_code == 400
