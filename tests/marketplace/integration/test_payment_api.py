"""Integration tests for Payment API endpoints via TestClient."""


def _payment_for(client, order_id):
    response = client.get(f"/payments/order/{order_id}")
    assert response.status_code == 200
    return response.json()


class TestPaymentQueriesAPI:
    def test_get_by_id(self, client, place_order):
        payment = _payment_for(client, place_order()["order_id"])
        response = client.get(f"/payments/{payment['payment_id']}")
        assert response.status_code == 200
        assert response.json()["amount"] == 50000

    def test_unknown_payment_returns_404(self, client):
        assert client.get("/payments/missing-payment").status_code == 404

    def test_unknown_order_returns_404(self, client):
        assert client.get("/payments/order/missing-order").status_code == 404

    def test_by_payer_and_status(self, client, place_order, api_buyer_id):
        place_order()
        assert len(client.get(f"/payments/user/{api_buyer_id}").json()) == 1
        assert len(client.get("/payments/status/PENDING").json()) == 1
        assert client.get("/payments/status/COMPLETED").json() == []
        assert len(client.get("/payments").json()) == 1


class TestPaymentActionsAPI:
    def test_process_completes_payment(self, client, place_order):
        payment = _payment_for(client, place_order()["order_id"])

        response = client.post(f"/payments/{payment['payment_id']}/process")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "COMPLETED"
        assert body["transaction_id"].startswith("TXN-")
        assert body["completed_at"] is not None

    def test_process_with_declining_gateway(self, client, place_order):
        payment = _payment_for(client, place_order()["order_id"])
        configured = client.post(
            "/payments/gateway/configure",
            json={"should_succeed": False, "failure_reason": "Card declined"},
        )
        assert configured.status_code == 200

        body = client.post(f"/payments/{payment['payment_id']}/process").json()
        assert body["status"] == "FAILED"
        assert body["failure_reason"] == "Card declined"

    def test_refund_completed_payment(self, client, place_order):
        payment_id = _payment_for(client, place_order()["order_id"])["payment_id"]
        client.post(f"/payments/{payment_id}/process")

        response = client.post(f"/payments/{payment_id}/refund")
        assert response.status_code == 200
        assert response.json()["status"] == "REFUNDED"
        assert response.json()["refunded_at"] is not None

    def test_refund_pending_payment_returns_400(self, client, place_order):
        payment_id = _payment_for(client, place_order()["order_id"])["payment_id"]
        assert client.post(f"/payments/{payment_id}/refund").status_code == 400

    def test_cancel_pending_payment(self, client, place_order):
        payment_id = _payment_for(client, place_order()["order_id"])["payment_id"]

        response = client.post(f"/payments/{payment_id}/cancel")
        assert response.status_code == 200
        assert response.json()["status"] == "CANCELLED"

    def test_cancel_order_after_processing_refunds(self, client, place_order):
        order_id = place_order()["order_id"]
        payment_id = _payment_for(client, order_id)["payment_id"]
        client.post(f"/payments/{payment_id}/process")

        client.patch(f"/orders/{order_id}/cancel")

        assert _payment_for(client, order_id)["status"] == "REFUNDED"
