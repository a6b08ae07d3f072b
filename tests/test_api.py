"""
Tests for calculator, planner and ledger API endpoints.
"""

import pytest


# ============================================================================
# CALCULATOR API TESTS
# ============================================================================

class TestCalculatorAPI:
    """Test loan and livestock calculator endpoints."""

    def test_emi_defaults(self, client):
        response = client.post("/api/calculate/emi", json={})
        assert response.status_code == 200
        data = response.json()
        assert abs(data["periodic_payment"] - 4614.49) < 0.01
        assert abs(data["total_interest"] - 10747.76) < 0.05
        assert data["principal"] == 100000
        assert data["amortization_schedule"] is None

    def test_emi_with_schedule(self, client):
        response = client.post(
            "/api/calculate/emi",
            json={
                "principal": 12000,
                "annual_rate_percent": 12,
                "tenure_value": 12,
                "tenure_unit": "months",
                "include_schedule": True,
                "start_date": "2025-01-01",
            },
        )
        assert response.status_code == 200
        schedule = response.json()["amortization_schedule"]
        assert len(schedule) == 12
        assert schedule[0]["date"] == "2025-01-01"
        assert schedule[-1]["ending_balance"] == 0

    def test_emi_weekly_schedule_rejected(self, client):
        response = client.post(
            "/api/calculate/emi",
            json={"repayment_frequency": "weekly", "include_schedule": True},
        )
        assert response.status_code == 400

    def test_emi_schedule_requires_whole_months(self, client):
        response = client.post(
            "/api/calculate/emi",
            json={"tenure_value": 1.5, "tenure_unit": "months", "include_schedule": True},
        )
        assert response.status_code == 400

    def test_emi_schedule_too_long(self, client):
        response = client.post(
            "/api/calculate/emi",
            json={"tenure_value": 200, "include_schedule": True},
        )
        assert response.status_code == 400
        assert client.post("/api/calculate/emi", json={"tenure_value": 200}).status_code == 200

    @pytest.mark.parametrize(
        "field, value",
        [("principal", 0), ("annual_rate_percent", -1), ("tenure_value", 0)],
    )
    def test_emi_rejects_non_positive(self, client, field, value):
        response = client.post("/api/calculate/emi", json={field: value})
        assert response.status_code == 422

    def test_emi_rejects_unknown_unit(self, client):
        response = client.post("/api/calculate/emi", json={"tenure_unit": "decades"})
        assert response.status_code == 422

    def test_crop_loan(self, client):
        response = client.post(
            "/api/calculate/crop-loan",
            json={"start_date": "2025-01-15"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["repayment_months"] == 6
        assert data["repayment_start_date"] == "2025-07-15"
        assert len(data["schedule"]) == 6
        assert data["schedule"][0]["due_date"] == "2025-07-15"
        assert data["schedule"][-1]["due_date"] == "2025-12-15"
        assert data["grace_interest"] == pytest.approx(1750)

    def test_crop_loan_grace_exceeds_tenure(self, client):
        response = client.post(
            "/api/calculate/crop-loan",
            json={"tenure_value": 6, "grace_period_months": 9},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["schedule"] == []
        assert data["repayment_start_date"] is None

    @pytest.mark.parametrize(
        "payload",
        [
            {"tenure_value": 9000, "tenure_unit": "years", "start_date": "2025-01-01"},
            {"start_date": "9999-06-01"},
        ],
    )
    def test_crop_loan_out_of_range(self, client, payload):
        response = client.post("/api/calculate/crop-loan", json=payload)
        assert response.status_code == 400

    def test_livestock_defaults(self, client):
        response = client.post("/api/calculate/livestock", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["total_investment"] == 11000
        assert data["profit_or_loss"] == 1000
        assert data["break_even_units_rounded"] == 10
        assert data["is_profitable"] is True

    def test_livestock_requires_whole_animals(self, client):
        response = client.post("/api/calculate/livestock", json={"unit_count": 2.5})
        assert response.status_code == 422

    def test_compare_loans(self, client):
        response = client.post(
            "/api/calculate/compare-loans",
            json={
                "loans": [
                    {"name": "Bank A", "principal": 100000, "annual_rate_percent": 10, "tenure_value": 2},
                    {
                        "name": "Co-op",
                        "principal": 50000,
                        "annual_rate_percent": 12,
                        "tenure_value": 12,
                        "tenure_unit": "months",
                    },
                ]
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert data["cheapest"]["name"] == "Co-op"
        assert data["loans"][0]["is_cheapest"] is True
        assert data["loans"][1]["is_cheapest"] is False

    def test_compare_loans_requires_entries(self, client):
        response = client.post("/api/calculate/compare-loans", json={"loans": []})
        assert response.status_code == 422


# ============================================================================
# PLANNER API TESTS
# ============================================================================

class TestPlannerAPI:
    """Test goal planning and recommendation endpoints."""

    def test_goal_feasibility_defaults(self, client):
        response = client.post("/api/planner/goal-feasibility", json={})
        assert response.status_code == 200
        data = response.json()
        assert data["goal_name"] == "New Tractor"
        assert data["status"] == "feasible"
        assert data["required_monthly_savings"] == 750

    def test_goal_already_achieved(self, client):
        response = client.post(
            "/api/planner/goal-feasibility",
            json={"goal_cost": 500, "current_savings": 800},
        )
        assert response.json()["status"] == "already_achieved"

    def test_goal_infeasible(self, client):
        response = client.post("/api/planner/goal-feasibility", json={"tenure_months": 3})
        data = response.json()
        assert data["status"] == "infeasible"
        assert data["suggested_tenure_months"] == 5

    def test_multi_goal_sequential(self, client):
        response = client.post(
            "/api/planner/multi-goal",
            json={
                "goals": [
                    {"name": "Tractor", "cost": 20000, "priority": 2},
                    {"name": "Well", "cost": 5000, "priority": 1},
                ],
                "mode": "sequential",
                "monthly_savings": 1000,
            },
        )
        assert response.status_code == 200
        data = response.json()
        assert [g["name"] for g in data["goals"]] == ["Well", "Tractor"]
        assert data["total_months"] == 25

    def test_multi_goal_priority_bounds(self, client):
        response = client.post(
            "/api/planner/multi-goal",
            json={"goals": [{"name": "Tractor", "cost": 20000, "priority": 6}]},
        )
        assert response.status_code == 422

    def test_multi_goal_requires_goals(self, client):
        response = client.post("/api/planner/multi-goal", json={"goals": []})
        assert response.status_code == 422

    def test_recommendations(self, client):
        response = client.post(
            "/api/planner/recommendations",
            json={"location": "rural", "time_horizon": "short-term", "risk_appetite": "low"},
        )
        assert response.status_code == 200
        text = response.json()["recommendation"]
        assert "Cooperative Bank Fixed Deposits" in text
        assert "Kisan Credit Card" in text


# ============================================================================
# LEDGER API TESTS
# ============================================================================

class TestLedgerAPI:
    """Test transactions, goals, categories, budget and summary."""

    def test_list_transactions(self, client):
        response = client.get("/api/transactions")
        assert response.status_code == 200
        assert response.json()["total"] == 6

    def test_list_income_only(self, client):
        data = client.get("/api/transactions", params={"type": "income"}).json()
        assert data["total"] == 1
        assert data["transactions"][0]["category"] == "Salary"

    def test_transaction_lifecycle(self, client):
        response = client.post(
            "/api/transactions",
            json={
                "type": "expense",
                "amount": 75.5,
                "category": "Dining Out",
                "date": "2023-12-20",
                "description": "Dinner",
            },
        )
        assert response.status_code == 201
        transaction_id = response.json()["id"]

        response = client.put(f"/api/transactions/{transaction_id}", json={"amount": 80})
        assert response.status_code == 200
        assert response.json()["amount"] == 80
        assert response.json()["description"] == "Dinner"

        assert client.get(f"/api/transactions/{transaction_id}").status_code == 200

        response = client.delete(f"/api/transactions/{transaction_id}")
        assert response.json() == {"deleted": True, "id": transaction_id}
        assert client.get(f"/api/transactions/{transaction_id}").status_code == 404

    def test_null_update_leaves_transaction_intact(self, client):
        transaction = client.get("/api/transactions").json()["transactions"][0]
        response = client.put(f"/api/transactions/{transaction['id']}", json={"amount": None})
        assert response.status_code == 200
        assert response.json()["amount"] == transaction["amount"]

        response = client.get("/api/summary")
        assert response.status_code == 200
        assert response.json()["total_income"] == 4500

    def test_null_update_leaves_goal_intact(self, client):
        goal = client.get("/api/goals").json()[0]
        response = client.put(f"/api/goals/{goal['id']}", json={"name": None})
        assert response.status_code == 200
        assert response.json()["name"] == goal["name"]
        assert client.get("/api/goals").status_code == 200

    def test_transaction_validation(self, client):
        response = client.post(
            "/api/transactions",
            json={"type": "expense", "amount": -5, "category": "Rent", "date": "2024-01-01", "description": "x"},
        )
        assert response.status_code == 422

    def test_unknown_transaction(self, client):
        assert client.put("/api/transactions/nope", json={"amount": 1}).status_code == 404
        assert client.delete("/api/transactions/nope").status_code == 404

    def test_goal_lifecycle(self, client):
        response = client.post("/api/goals", json={"name": "Tube well", "target_amount": 2500})
        assert response.status_code == 201
        goal_id = response.json()["id"]
        assert len(client.get("/api/goals").json()) == 3

        response = client.put(f"/api/goals/{goal_id}", json={"name": "Bore well"})
        assert response.json()["name"] == "Bore well"
        assert response.json()["target_amount"] == 2500

        assert client.delete(f"/api/goals/{goal_id}").status_code == 200
        assert client.delete(f"/api/goals/{goal_id}").status_code == 404

    def test_categories(self, client):
        assert len(client.get("/api/categories", params={"type": "income"}).json()) == 2

        response = client.post("/api/categories", json={"name": "Fertilizer", "type": "expense"})
        assert response.status_code == 201

        response = client.post("/api/categories", json={"name": "Fertilizer", "type": "expense"})
        assert response.status_code == 409

        assert client.delete("/api/categories/expense/Fertilizer").status_code == 200
        assert client.delete("/api/categories/expense/Fertilizer").status_code == 404

    def test_budget(self, client):
        assert client.get("/api/budget").json() == {"amount": 3000}
        assert client.put("/api/budget", json={"amount": 2500}).json() == {"amount": 2500}
        assert client.put("/api/budget", json={"amount": 0}).status_code == 422

    def test_summary(self, client):
        response = client.get("/api/summary")
        assert response.status_code == 200
        data = response.json()
        assert data["total_income"] == 4500
        assert data["total_expenses"] == 2180
        assert data["balance"] == 2320
        assert data["spending_by_category"]["Rent"] == 1500
        assert len(data["recent_transactions"]) == 5
        assert data["recent_transactions"][0]["category"] == "Entertainment"


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
