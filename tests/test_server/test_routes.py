"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from pokersettle import __version__
from pokersettle.server.app import create_app


@pytest.fixture
def client():
    """Test client over a fresh application."""
    return TestClient(create_app())


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}


class TestEvaluationRoutes:
    """Tests for /evaluate, /best_hand and /compare."""

    def test_evaluate(self, client):
        response = client.post("/evaluate", json={"cards": ["As", "Ks", "Qs", "Js", "10s"]})

        assert response.status_code == 200
        body = response.json()
        assert body["hand_class"] == "ROYAL_FLUSH"
        assert body["hand_value"] == 9
        assert body["description"] == "Royal Flush"
        assert len(body["cards"]) == 5

    def test_evaluate_wrong_count(self, client):
        response = client.post("/evaluate", json={"cards": ["As", "Ks"]})

        assert response.status_code == 400
        assert response.json()["error"] == "invalid_input_size"

    def test_evaluate_bad_card(self, client):
        response = client.post("/evaluate", json={"cards": ["As", "Ks", "Qs", "Js", "Zz"]})
        assert response.status_code == 422

    def test_best_hand(self, client):
        response = client.post(
            "/best_hand", json={"cards": ["As", "Ah", "Ad", "Kc", "Ks", "2h", "3c"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["hand_class"] == "FULL_HOUSE"
        assert body["values"] == [14, 13]
        assert body["description"] == "Full House, Aces over Kings"

    def test_best_hand_wrong_count(self, client):
        response = client.post("/best_hand", json={"cards": ["As", "Ah", "Ad", "Kc", "Ks"]})
        assert response.status_code == 400

    def test_compare(self, client):
        response = client.post("/compare", json={
            "first": ["2s", "3h", "4d", "5c", "As"],
            "second": ["2h", "3d", "4c", "5s", "6h"],
        })

        assert response.status_code == 200
        assert response.json()["result"] == -1

    def test_compare_tie(self, client):
        response = client.post("/compare", json={
            "first": ["As", "Kh", "Qd", "Jc", "9s"],
            "second": ["Ah", "Kd", "Qc", "Js", "9h"],
        })
        assert response.json()["result"] == 0


class TestSettlementRoutes:
    """Tests for /side_pots and /showdown."""

    def test_side_pots(self, client):
        response = client.post("/side_pots", json={"players": [
            {"id": "A", "total_bet": 50, "all_in": True},
            {"id": "B", "total_bet": 100},
            {"id": "C", "total_bet": 100},
        ]})

        assert response.status_code == 200
        body = response.json()
        assert [p["amount"] for p in body["pots"]] == [150, 100]
        assert body["pots"][1]["eligible_player_ids"] == ["B", "C"]
        assert body["total"] == 250

    def test_showdown(self, client):
        response = client.post("/showdown", json={
            "players": [
                {"id": "A", "name": "Alice", "total_bet": 50, "all_in": True, "cards": ["As", "Ks"]},
                {"id": "B", "total_bet": 100, "cards": ["Qh", "Qd"]},
                {"id": "C", "total_bet": 100, "cards": ["Jh", "2d"]},
            ],
            "community_cards": ["Qs", "Js", "10s", "2h", "3c"],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["winners"] == ["A", "B"]
        assert body["pot_results"][0]["winner_names"] == ["Alice"]
        assert body["stacks"] == [
            {"id": "A", "chips": 150},
            {"id": "B", "chips": 100},
            {"id": "C", "chips": 0},
        ]
        assert body["hands"]["B"]["description"] == "Three of a Kind, Queens"
        assert body["skipped_pots"] == []

    def test_showdown_orphan_pot_skipped(self, client):
        response = client.post("/showdown", json={
            "players": [
                {"id": "A", "total_bet": 10, "folded": True},
                {"id": "B", "total_bet": 20, "folded": True},
            ],
            "community_cards": [],
        })

        assert response.status_code == 200
        assert response.json()["skipped_pots"][0]["amount"] == 30

    def test_showdown_orphan_pot_strict(self, client):
        response = client.post("/showdown", json={
            "players": [
                {"id": "A", "total_bet": 10, "folded": True},
                {"id": "B", "total_bet": 20, "folded": True},
            ],
            "community_cards": [],
            "strict": True,
        })

        assert response.status_code == 500
        assert response.json()["error"] == "internal_consistency"

    def test_showdown_short_board(self, client):
        """Two hole cards and a flop is not enough to settle."""
        response = client.post("/showdown", json={
            "players": [
                {"id": "A", "total_bet": 10, "cards": ["As", "Ks"]},
                {"id": "B", "total_bet": 10, "cards": ["Qh", "Qd"]},
            ],
            "community_cards": ["2s", "3s"],
        })
        assert response.status_code == 400


class TestAIRoutes:
    """Tests for /decide, /difficulties and /advice."""

    def test_decide(self, client):
        response = client.post("/decide", json={
            "player": {"id": "bot", "chips": 1000, "cards": ["As", "Ah"]},
            "table": {"current_bet": 20, "pot": 30, "min_raise": 40},
            "difficulty": "hard",
            "seed": 1,
        })

        assert response.status_code == 200
        body = response.json()
        assert body["action"] == "RAISE"
        assert body["amount"] == 40
        assert body["hand_strength"] == 10

    def test_decide_seed_is_reproducible(self, client):
        request = {
            "player": {"id": "bot", "chips": 1000, "cards": ["9s", "8d"]},
            "table": {"current_bet": 20, "pot": 30},
            "seed": 42,
        }
        first = client.post("/decide", json=request).json()
        second = client.post("/decide", json=request).json()
        assert first == second

    def test_decide_unknown_difficulty(self, client):
        response = client.post("/decide", json={
            "player": {"id": "bot", "chips": 1000, "cards": ["As", "Ah"]},
            "table": {},
            "difficulty": "nightmare",
        })
        assert response.status_code == 400

    def test_difficulties(self, client):
        response = client.get("/difficulties")

        assert response.status_code == 200
        tiers = {t["name"]: t for t in response.json()}
        assert set(tiers) == {"easy", "medium", "hard"}
        assert tiers["easy"]["fold_threshold"] == 3
        assert tiers["hard"]["pot_odds_threshold"] == 0.35

    def test_advice(self, client):
        response = client.post("/advice", json={"hole_cards": ["As", "Ah"]})

        assert response.status_code == 200
        assert response.json()["advice"].startswith("You have: Pocket Aces")

    def test_advice_bad_phase(self, client):
        response = client.post("/advice", json={"hole_cards": ["As", "Ah"], "phase": "showdown"})
        assert response.status_code == 400


class TestCardValidation:
    """Tests for rejecting card input the core cannot settle."""

    def test_duplicate_card_in_hand(self, client):
        response = client.post("/evaluate", json={"cards": ["As"] * 5})

        assert response.status_code == 422
        assert "Duplicate card: As" in response.json()["detail"]

    def test_same_card_in_two_notations(self, client):
        response = client.post("/best_hand", json={"cards": ["10h", "Th", "2c", "3d", "4s", "9h"]})
        assert response.status_code == 422

    def test_hole_card_repeated_on_board(self, client):
        response = client.post("/showdown", json={
            "players": [
                {"id": "A", "total_bet": 10, "cards": ["As", "Ks"]},
                {"id": "B", "total_bet": 10, "cards": ["Qh", "Qd"]},
            ],
            "community_cards": ["As", "Js", "10s", "2h", "3c"],
        })
        assert response.status_code == 422

    def test_hole_card_shared_by_two_players(self, client):
        response = client.post("/showdown", json={
            "players": [
                {"id": "A", "total_bet": 10, "cards": ["As", "Ks"]},
                {"id": "B", "total_bet": 10, "cards": ["As", "Qd"]},
            ],
            "community_cards": ["Qs", "Js", "10s", "2h", "3c"],
        })
        assert response.status_code == 422

    def test_advice_single_hole_card(self, client):
        response = client.post("/advice", json={"hole_cards": ["As"]})

        assert response.status_code == 422
        assert "Expected 0 or 2 hole cards" in response.json()["detail"]

    def test_advice_hole_card_on_board(self, client):
        response = client.post("/advice", json={
            "hole_cards": ["As", "Ah"],
            "community_cards": ["As", "7c", "2h"],
        })
        assert response.status_code == 422

    def test_decide_single_hole_card(self, client):
        response = client.post("/decide", json={
            "player": {"id": "bot", "chips": 1000, "cards": ["As"]},
            "table": {"current_bet": 20, "pot": 30},
        })
        assert response.status_code == 422

    def test_decide_without_cards(self, client):
        """Unknown hole cards score zero rather than failing."""
        response = client.post("/decide", json={
            "player": {"id": "bot", "chips": 1000},
            "table": {"current_bet": 0, "pot": 30},
            "seed": 3,
        })

        assert response.status_code == 200
        body = response.json()
        assert body["action"] == "CHECK"
        assert body["hand_strength"] == 0

    def test_side_pots_three_hole_cards(self, client):
        response = client.post("/side_pots", json={"players": [
            {"id": "A", "total_bet": 50, "cards": ["As", "Ks", "Qs"]},
        ]})
        assert response.status_code == 422


class TestOpenAPI:

    def test_showdown_hands_are_typed(self, client):
        schemas = client.get("/openapi.json").json()["components"]["schemas"]
        hands = schemas["ShowdownResponse"]["properties"]["hands"]
        assert hands["additionalProperties"]["$ref"].endswith("/EvaluationSchema")
