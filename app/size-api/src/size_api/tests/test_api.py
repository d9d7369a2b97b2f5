"""Unit tests for the API.

These tests use FastAPI's TestClient and run the real analyzer, which needs
no external services.
"""
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from size_analyzer import QueryError
from size_api.main import app

client = TestClient(app)

SAMPLE = "\n".join(
    [
        "$ cd /",
        "$ ls",
        "dir a",
        "14848514 b.txt",
        "8504156 c.dat",
        "dir d",
        "$ cd a",
        "$ ls",
        "dir e",
        "29116 f",
        "2557 g",
        "62596 h.lst",
        "$ cd e",
        "$ ls",
        "584 i",
        "$ cd ..",
        "$ cd ..",
        "$ cd d",
        "$ ls",
        "4060174 j",
        "8033020 d.log",
        "5626152 d.ext",
        "7214296 k",
    ]
)


# ── Root ──────────────────────────────────────────────────────────────────────

def test_root() -> None:
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "SIZE API"


# ── Health ────────────────────────────────────────────────────────────────────

def test_health_ok() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["analyzer"] == "ok"


def test_health_analyzer_failing() -> None:
    with patch(
        "size_api.services.health.analyze_transcript", side_effect=QueryError("broken")
    ):
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["analyzer"] == "failing"


# ── Analysis ──────────────────────────────────────────────────────────────────

def test_analysis_sample() -> None:
    response = client.post("/api/v1/analysis", json={"transcript": SAMPLE})
    assert response.status_code == 200
    data = response.json()
    assert data["total_size"] == 48381165
    assert data["bounded_size_sum"] == 95437
    assert data["min_qualifying_size"] == 24933642
    assert set(data["directories"]) == {"/", "/a", "/a/e", "/d"}


def test_analysis_overrides() -> None:
    response = client.post(
        "/api/v1/analysis",
        json={"transcript": SAMPLE, "threshold": 1000, "capacity": 48381165},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["bounded_size_sum"] == 584
    assert data["min_qualifying_size"] == 48381165


@pytest.mark.parametrize(
    "transcript",
    [
        "$ cd /\n$ ls\nnonsense\n",
        "$ cd /\n$ ls\n$ ls\n",
        "$ cd /\n$ cd ..\n",
    ],
)
def test_analysis_rejects_corrupt_transcripts(transcript: str) -> None:
    response = client.post("/api/v1/analysis", json={"transcript": transcript})
    assert response.status_code == 422
    assert response.json()["detail"]


def test_analysis_negative_threshold() -> None:
    response = client.post("/api/v1/analysis", json={"transcript": SAMPLE, "threshold": -1})
    assert response.status_code == 422


def test_analysis_service_is_awaited() -> None:
    with patch(
        "size_api.routers.analysis.analysisService.run_analysis",
        new=AsyncMock(side_effect=QueryError("no directory")),
    ) as mock_run:
        response = client.post("/api/v1/analysis", json={"transcript": SAMPLE})

    assert response.status_code == 422
    assert response.json()["detail"] == "no directory"
    mock_run.assert_awaited_once()
