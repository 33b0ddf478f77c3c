"""Tests for the league/season manage endpoints."""

from __future__ import annotations

from datetime import date
from types import SimpleNamespace
from typing import AsyncGenerator
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from app.db import get_db
from app.db.leagues import League, Season
from api.main import app

API_KEY = "m" * 32


class _FakeSession:
    """Just enough of AsyncSession for the manage routes."""

    def __init__(self, existing: dict[tuple[type, int], object] | None = None) -> None:
        self.existing = existing or {}
        self.added: list[object] = []
        self.deleted: list[object] = []
        self.statements: list[object] = []
        self._next_id = 100

    async def get(self, model: type, ident: int) -> object | None:
        return self.existing.get((model, ident))

    def add(self, obj: object) -> None:
        self.added.append(obj)

    async def flush(self) -> None:
        for obj in self.added:
            if getattr(obj, "id", None) is None:
                obj.id = self._next_id
                self._next_id += 1

    async def delete(self, obj: object) -> None:
        self.deleted.append(obj)

    async def execute(self, statement: object) -> SimpleNamespace:
        self.statements.append(statement)
        return SimpleNamespace(rowcount=0)


def _league(league_id: int = 1) -> League:
    return League(
        id=league_id,
        name="Dallas Youth Baseball",
        organization=None,
        sport="Baseball",
        website="https://www.dallasyouthbaseball.com/",
        source="seed",
        active=True,
    )


def _season(season_id: int = 7, league_id: int = 1) -> Season:
    return Season(
        id=season_id,
        league_id=league_id,
        name="Spring 2026 Little League",
        sport="Baseball",
        signup_start=date(2026, 1, 15),
        signup_end=date(2026, 2, 28),
        season_start=None,
        season_end=None,
        age_group="12U",
        details_url=None,
        registration_url=None,
        visible=True,
    )


class _ManageTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.client = TestClient(app)
        self._settings_patch = patch("app.dependencies.auth.settings")
        mock_settings = self._settings_patch.start()
        mock_settings.api_key = API_KEY

    def tearDown(self) -> None:
        self._settings_patch.stop()
        app.dependency_overrides.clear()

    def _override_db(self, session: _FakeSession) -> None:
        async def override_get_db() -> AsyncGenerator[_FakeSession, None]:
            yield session

        app.dependency_overrides[get_db] = override_get_db

    def _headers(self) -> dict[str, str]:
        return {"X-API-Key": API_KEY}


class TestManageAuth(_ManageTestCase):
    def test_missing_key(self) -> None:
        self._override_db(_FakeSession())
        response = self.client.post("/api/manage/leagues", json={})
        assert response.status_code == 401

    def test_wrong_key(self) -> None:
        self._override_db(_FakeSession())
        response = self.client.delete("/api/manage/seasons/7", headers={"X-API-Key": "nope"})
        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid API key"


class TestManageLeagues(_ManageTestCase):
    def test_create_league(self) -> None:
        session = _FakeSession()
        self._override_db(session)

        response = self.client.post(
            "/api/manage/leagues",
            headers=self._headers(),
            json={"name": "Allen Sports Association", "sport": "Multi-Sport", "website": "https://www.allensportsassociation.com/"},
        )

        assert response.status_code == 201
        payload = response.json()
        assert payload["id"] == 100
        assert payload["source"] == "manual"
        assert payload["active"] is True
        assert isinstance(session.added[0], League)

    def test_create_league_requires_website(self) -> None:
        self._override_db(_FakeSession())
        response = self.client.post(
            "/api/manage/leagues",
            headers=self._headers(),
            json={"name": "Allen Sports Association", "sport": "Multi-Sport"},
        )
        assert response.status_code == 422

    def test_update_league_ignores_null_required_fields(self) -> None:
        league = _league()
        self._override_db(_FakeSession({(League, 1): league}))

        response = self.client.put(
            "/api/manage/leagues/1",
            headers=self._headers(),
            json={"name": None, "organization": "DYB", "active": False},
        )

        assert response.status_code == 200
        assert league.name == "Dallas Youth Baseball"
        assert league.organization == "DYB"
        assert league.active is False

    def test_update_missing_league(self) -> None:
        self._override_db(_FakeSession())
        response = self.client.put("/api/manage/leagues/9", headers=self._headers(), json={})
        assert response.status_code == 404
        assert response.json()["detail"] == "League not found"

    def test_delete_league_removes_seasons(self) -> None:
        league = _league()
        session = _FakeSession({(League, 1): league})
        self._override_db(session)

        response = self.client.delete("/api/manage/leagues/1", headers=self._headers())

        assert response.json() == {"success": True}
        assert session.deleted == [league]
        assert len(session.statements) == 1


class TestManageSeasons(_ManageTestCase):
    def test_create_season(self) -> None:
        session = _FakeSession({(League, 1): _league()})
        self._override_db(session)

        response = self.client.post(
            "/api/manage/seasons",
            headers=self._headers(),
            json={
                "leagueId": 1,
                "name": "Fall 2026 Baseball",
                "sport": "Baseball",
                "signupStart": "2026-06-01",
                "signupEnd": "2026-07-15",
                "ageGroup": "5-14",
            },
        )

        assert response.status_code == 201
        payload = response.json()
        assert payload["leagueId"] == 1
        assert payload["signupEnd"] == "2026-07-15"
        assert payload["seasonStart"] is None
        assert payload["visible"] is True
        created = session.added[0]
        assert isinstance(created, Season)
        assert created.signup_start == date(2026, 6, 1)

    def test_create_season_unknown_league(self) -> None:
        self._override_db(_FakeSession())
        response = self.client.post(
            "/api/manage/seasons",
            headers=self._headers(),
            json={"leagueId": 5, "name": "Fall", "sport": "Soccer"},
        )
        assert response.status_code == 404

    def test_create_season_rejects_bad_date(self) -> None:
        self._override_db(_FakeSession({(League, 1): _league()}))
        response = self.client.post(
            "/api/manage/seasons",
            headers=self._headers(),
            json={"leagueId": 1, "name": "Fall", "sport": "Soccer", "signupEnd": "next week"},
        )
        assert response.status_code == 422

    def test_update_season(self) -> None:
        season = _season()
        self._override_db(_FakeSession({(Season, 7): season}))

        response = self.client.put(
            "/api/manage/seasons/7",
            headers=self._headers(),
            json={"seasonStart": "2026-03-14", "seasonEnd": "2026-06-13", "visible": False},
        )

        assert response.status_code == 200
        assert season.season_start == date(2026, 3, 14)
        assert season.visible is False
        assert response.json()["seasonEnd"] == "2026-06-13"

    def test_update_season_can_clear_optional_dates(self) -> None:
        season = _season()
        self._override_db(_FakeSession({(Season, 7): season}))

        response = self.client.put(
            "/api/manage/seasons/7", headers=self._headers(), json={"signupStart": None}
        )

        assert response.status_code == 200
        assert season.signup_start is None

    def test_update_season_moves_to_unknown_league(self) -> None:
        self._override_db(_FakeSession({(Season, 7): _season()}))
        response = self.client.put(
            "/api/manage/seasons/7", headers=self._headers(), json={"leagueId": 42}
        )
        assert response.status_code == 404

    def test_delete_season(self) -> None:
        season = _season()
        session = _FakeSession({(Season, 7): season})
        self._override_db(session)

        response = self.client.delete("/api/manage/seasons/7", headers=self._headers())

        assert response.status_code == 200
        assert session.deleted == [season]

    def test_delete_missing_season(self) -> None:
        self._override_db(_FakeSession())
        response = self.client.delete("/api/manage/seasons/7", headers=self._headers())
        assert response.status_code == 404
        assert response.json()["detail"] == "Season not found"
