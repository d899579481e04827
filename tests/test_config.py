"""Unit tests for versex.core.config: settings validation."""

import tests.support  # noqa: F401  (points settings at an in-memory SQLite database)

import unittest

from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import ValidationError

from versex.core.config import Settings
from versex.main import add_cors


def _settings(**kwargs: object) -> Settings:
    return Settings(_env_file=None, **kwargs)


class TestDatabaseUrl(unittest.TestCase):

    def test_postgres_and_sqlite_accepted(self) -> None:
        self.assertEqual(
            _settings(DATABASE_URL=" postgresql://u:p@db:5432/versex ").DATABASE_URL,
            "postgresql://u:p@db:5432/versex",
        )
        self.assertEqual(_settings(DATABASE_URL="sqlite:///versex.db").DATABASE_URL, "sqlite:///versex.db")

    def test_other_scheme_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://u:p@db/versex")

    def test_empty_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="  ")


class TestRanges(unittest.TestCase):

    def test_bcrypt_rounds_bounds(self) -> None:
        self.assertEqual(_settings(BCRYPT_ROUNDS=4).BCRYPT_ROUNDS, 4)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=17)

    def test_log_retention_hours_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(LOG_RETENTION_HOURS=0)
        with self.assertRaises(ValidationError):
            _settings(LOG_RETENTION_HOURS=8761)

    def test_empty_pepper_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(AUTH_PEPPER=" ")

    def test_log_level_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(ValidationError):
            _settings(LOG_LEVEL="chatty")


class TestCorsOrigins(unittest.TestCase):

    def test_split_and_strip(self) -> None:
        s = _settings(CORS_ORIGINS="http://localhost:4200, https://home.lan ,")
        self.assertEqual(s.cors_origins, ["http://localhost:4200", "https://home.lan"])

    def test_unset_uses_dashboard_dev_server_in_dev_only(self) -> None:
        self.assertEqual(_settings(APP_ENV="dev").cors_origins, ["http://localhost:4200"])
        self.assertEqual(_settings(APP_ENV="prod").cors_origins, [])

    def test_explicit_origins_apply_in_prod(self) -> None:
        s = _settings(APP_ENV="prod", CORS_ORIGINS="https://home.lan")
        self.assertEqual(s.cors_origins, ["https://home.lan"])


class TestCorsMiddleware(unittest.TestCase):
    """add_cors wires Settings.cors_origins into the app."""

    def _preflight(self, config: Settings, origin: str):
        application = FastAPI()
        add_cors(application, config)

        @application.get("/")
        def root() -> dict[str, str]:
            return {}

        return TestClient(application).options(
            "/",
            headers={"Origin": origin, "Access-Control-Request-Method": "GET"},
        )

    def test_prod_with_configured_origin_allows_preflight(self) -> None:
        r = self._preflight(_settings(APP_ENV="prod", CORS_ORIGINS="https://home.lan"), "https://home.lan")
        self.assertEqual(r.status_code, 200)
        self.assertEqual(r.headers["access-control-allow-origin"], "https://home.lan")

    def test_prod_without_configured_origin_rejects_preflight(self) -> None:
        r = self._preflight(_settings(APP_ENV="prod"), "https://home.lan")
        self.assertEqual(r.status_code, 400)
        self.assertNotIn("access-control-allow-origin", r.headers)


if __name__ == "__main__":
    unittest.main()
