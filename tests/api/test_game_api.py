"""Tests for game API endpoints."""

import pytest
from fastapi.testclient import TestClient


def _create(client: TestClient, **body) -> str:
    response = client.post("/game/sessions", json=body)
    assert response.status_code == 200
    return response.json()["session"]["session_id"]


def _play_until_offer(client: TestClient, session_id: str) -> None:
    for weapon in ["rock", "paper", "scissors"]:
        client.post(f"/game/sessions/{session_id}/round", json={"weapon": weapon})


class TestWeapons:
    """Tests for GET /game/weapons."""

    def test_catalog(self, client: TestClient):
        response = client.get("/game/weapons")
        assert response.status_code == 200
        weapons = {w["weapon_id"]: w for w in response.json()}
        assert list(weapons) == ["rock", "paper", "scissors", "fire", "air"]
        assert weapons["rock"]["description"] == "Beats: scissors, fire"
        assert weapons["rock"]["name"] == "Rock"
        assert weapons["air"]["starter"] is False


class TestSessions:
    """Tests for session lifecycle endpoints."""

    def test_create_session(self, client: TestClient):
        response = client.post("/game/sessions", json={"seed": 5})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        session = data["session"]
        assert session["round_number"] == 1
        assert session["player_score"] == 0
        assert session["unlocked"] == ["rock", "paper", "scissors"]
        assert session["player_durability"]["rock"] == 3
        assert session["player_durability"]["fire"] == 0
        assert session["modes"] == {"arsenal": True, "effects": True}

    def test_get_session(self, client: TestClient):
        session_id = _create(client)
        response = client.get(f"/game/sessions/{session_id}")
        assert response.status_code == 200
        assert response.json()["session"]["session_id"] == session_id

    def test_get_session_not_found(self, client: TestClient):
        response = client.get("/game/sessions/missing")
        assert response.status_code == 404
        assert "not found" in response.json()["detail"].lower()

    def test_close_session(self, client: TestClient):
        session_id = _create(client)
        assert client.delete(f"/game/sessions/{session_id}").status_code == 200
        assert client.get(f"/game/sessions/{session_id}").status_code == 404
        assert client.delete(f"/game/sessions/{session_id}").status_code == 404


class TestRound:
    """Tests for POST /game/sessions/{id}/round."""

    def test_play_round(self, client: TestClient):
        session_id = _create(client, seed=11)
        response = client.post(f"/game/sessions/{session_id}/round", json={"weapon": "Rock"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        result = data["result"]
        assert result["player_choice"] == "rock"
        assert result["outcome"] in ("tie", "player", "computer")
        assert result["round_number"] == 2
        assert data["message"] == result["message"]
        assert data["session"]["player_durability"]["rock"] == 2

    def test_locked_weapon_is_ignored(self, client: TestClient):
        session_id = _create(client)
        response = client.post(f"/game/sessions/{session_id}/round", json={"weapon": "fire"})
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is False
        assert data["result"] is None
        assert data["session"]["round_number"] == 1

    def test_missing_weapon_is_422(self, client: TestClient):
        session_id = _create(client)
        response = client.post(f"/game/sessions/{session_id}/round", json={})
        assert response.status_code == 422

    def test_unknown_session(self, client: TestClient):
        response = client.post("/game/sessions/missing/round", json={"weapon": "rock"})
        assert response.status_code == 404

    def test_offer_after_third_round(self, client: TestClient):
        session_id = _create(client, seed=2)
        for weapon in ["rock", "paper", "scissors"]:
            data = client.post(
                f"/game/sessions/{session_id}/round", json={"weapon": weapon}
            ).json()
        assert data["result"]["upgrade_offered"] is True
        ids = [o["upgrade_id"] for o in data["session"]["upgrade_options"]]
        assert ids == ["fire", "air", "double", "shield", "reveal"]
        assert data["session"]["upgrade_offer_pending"] is True

    def test_round_ignored_until_upgrade_chosen(self, client: TestClient):
        session_id = _create(client, seed=2)
        _play_until_offer(client, session_id)

        data = client.post(
            f"/game/sessions/{session_id}/round", json={"weapon": "rock"}
        ).json()
        assert data["success"] is False
        assert data["result"] is None
        assert data["message"] == "Choose an upgrade before the next round"
        assert data["session"]["round_number"] == 4
        assert data["session"]["upgrade_offer_pending"] is True
        assert data["session"]["remaining_upgrades"] == ["fire", "air"]

        client.post(f"/game/sessions/{session_id}/upgrade", json={"upgrade_id": "shield"})
        data = client.post(
            f"/game/sessions/{session_id}/round", json={"weapon": "rock"}
        ).json()
        assert data["success"] is True
        assert data["result"]["played_round"] == 4


class TestUpgrade:
    """Tests for POST /game/sessions/{id}/upgrade."""

    def test_unlock_weapon(self, client: TestClient):
        session_id = _create(client)
        _play_until_offer(client, session_id)
        response = client.post(
            f"/game/sessions/{session_id}/upgrade", json={"upgrade_id": "fire"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert "fire" in data["session"]["unlocked"]
        assert data["session"]["computer_durability"]["fire"] == 3
        assert data["session"]["upgrade_offer_pending"] is False
        assert data["session"]["upgrade_options"] == []

    @pytest.mark.parametrize("upgrade_id", ["fire", "double"])
    def test_upgrade_before_offer_is_ignored(self, client: TestClient, upgrade_id: str):
        session_id = _create(client)
        before = client.get(f"/game/sessions/{session_id}").json()["session"]
        data = client.post(
            f"/game/sessions/{session_id}/upgrade", json={"upgrade_id": upgrade_id}
        ).json()
        assert data["success"] is False
        assert data["session"] == before
        assert data["session"]["unlocked"] == ["rock", "paper", "scissors"]
        assert data["session"]["active_effect"] is None

    def test_reveal_exposes_choice(self, client: TestClient):
        session_id = _create(client, seed=8)
        _play_until_offer(client, session_id)
        data = client.post(
            f"/game/sessions/{session_id}/upgrade", json={"upgrade_id": "reveal"}
        ).json()
        revealed = data["session"]["revealed_choice"]
        assert data["session"]["active_effect"] == "reveal"
        assert revealed in ("rock", "paper", "scissors")

        round_data = client.post(
            f"/game/sessions/{session_id}/round", json={"weapon": "paper"}
        ).json()
        assert round_data["result"]["computer_choice"] == revealed
        assert round_data["result"]["effect_used"] == "reveal"
        assert round_data["session"]["active_effect"] is None

    @pytest.mark.parametrize("upgrade_id", ["lizard", "rock"])
    def test_invalid_upgrade_is_ignored(self, client: TestClient, upgrade_id: str):
        session_id = _create(client)
        _play_until_offer(client, session_id)
        data = client.post(
            f"/game/sessions/{session_id}/upgrade", json={"upgrade_id": upgrade_id}
        ).json()
        assert data["success"] is False
        assert data["session"]["unlocked"] == ["rock", "paper", "scissors"]
        assert data["session"]["upgrade_offer_pending"] is True

    def test_effects_disabled(self, client: TestClient):
        session_id = _create(client, effects=False)
        _play_until_offer(client, session_id)
        data = client.post(
            f"/game/sessions/{session_id}/upgrade", json={"upgrade_id": "double"}
        ).json()
        assert data["success"] is False
        assert data["session"]["active_effect"] is None


class TestHistory:
    """Tests for GET /game/sessions/{id}/history."""

    def test_history(self, client: TestClient):
        session_id = _create(client, seed=4)
        for weapon in ["rock", "scissors"]:
            client.post(f"/game/sessions/{session_id}/round", json={"weapon": weapon})
        client.post(f"/game/sessions/{session_id}/round", json={"weapon": "air"})

        response = client.get(f"/game/sessions/{session_id}/history")
        assert response.status_code == 200
        rounds = response.json()["rounds"]
        assert [r["player_choice"] for r in rounds] == ["rock", "scissors"]

    def test_history_not_found(self, client: TestClient):
        assert client.get("/game/sessions/missing/history").status_code == 404
