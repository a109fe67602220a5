"""Integration tests for the last-game participants endpoint."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from dodge_radar.core.exceptions import MatchHistoryError, PlayerLookupError
from dodge_radar.core.riot_api import Platform
from dodge_radar.features.participants.dependencies import get_participants_service
from dodge_radar.features.participants.schemas import ParticipantResponse
from dodge_radar.main import app

PATH = "/api/get-last-game-participants"


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_service():
    service = AsyncMock()
    app.dependency_overrides[get_participants_service] = lambda: service
    return service


def test_last_game_participants(client, mock_service):
    """Participants are returned with the caller's region echoed"""
    # Setup
    mock_service.get_last_game_participants.return_value = [
        ParticipantResponse(
            game_name="Chovy",
            tag_line="KR2",
            region="kr",
            puuid="p-2",
            profile_icon_url="https://cdn.example/29.png",
        )
    ]

    # Execute
    response = client.post(PATH, json={"gameName": " Faker ", "tagLine": "KR1", "region": "kr"})

    # Verify
    assert response.status_code == 200
    assert response.json() == [
        {
            "gameName": "Chovy",
            "tagLine": "KR2",
            "region": "kr",
            "puuid": "p-2",
            "profileIconUrl": "https://cdn.example/29.png",
        }
    ]
    mock_service.get_last_game_participants.assert_awaited_once_with(
        "Faker", "KR1", Platform.KR, "kr"
    )


@pytest.mark.parametrize(
    "body",
    [
        {"tagLine": "KR1", "region": "KR"},
        {"gameName": "Faker", "tagLine": "", "region": "KR"},
        {"gameName": "Faker", "tagLine": "KR1"},
    ],
)
def test_missing_fields_is_400(client, mock_service, body):
    response = client.post(PATH, json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing gameName, tagLine, or region."}
    mock_service.get_last_game_participants.assert_not_called()


def test_unsupported_region_is_400(client, mock_service):
    response = client.post(PATH, json={"gameName": "Faker", "tagLine": "KR1", "region": "MOON1"})

    assert response.status_code == 400
    assert response.json() == {"error": "Unsupported region: MOON1"}


@pytest.mark.parametrize(
    "error,status_code,message",
    [
        (PlayerLookupError("Player Not Found"), 404, "Player Not Found"),
        (PlayerLookupError("No recent games found"), 404, "No recent games found"),
        (MatchHistoryError("Failed to retrieve match data"), 500, "Failed to retrieve match data"),
    ],
)
def test_service_errors_map_to_status(client, mock_service, error, status_code, message):
    mock_service.get_last_game_participants.side_effect = error

    response = client.post(PATH, json={"gameName": "Faker", "tagLine": "KR1", "region": "KR"})

    assert response.status_code == status_code
    assert response.json() == {"error": message}


def test_unexpected_error_is_500(client, mock_service):
    mock_service.get_last_game_participants.side_effect = RuntimeError("boom")

    response = client.post(PATH, json={"gameName": "Faker", "tagLine": "KR1", "region": "KR"})

    assert response.status_code == 500
    assert response.json() == {"error": "An internal server error occurred."}


def test_preflight(client):
    response = client.options(PATH)

    assert response.status_code == 200
    assert response.headers["Access-Control-Allow-Origin"] == "*"
