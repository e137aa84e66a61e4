"""Tests for DATABASE_URL resolution."""

from mindflow.db.session import DEFAULT_DB_URL, normalize_db_url


def test_empty_url_uses_local_sqlite():
    assert normalize_db_url("") == DEFAULT_DB_URL


def test_sqlite_urls_untouched():
    assert normalize_db_url("sqlite://") == "sqlite://"
    assert normalize_db_url("sqlite:///./data.db") == "sqlite:///./data.db"


def test_heroku_postgres_gets_driver_and_ssl():
    url = normalize_db_url("postgres://mf:pw@db.example.com:5432/mindflow")
    assert url == "postgresql+psycopg2://mf:pw@db.example.com:5432/mindflow?sslmode=require"


def test_local_postgres_skips_ssl():
    assert normalize_db_url("postgresql://mf:pw@localhost/mindflow") == "postgresql+psycopg2://mf:pw@localhost/mindflow"


def test_explicit_sslmode_kept():
    url = normalize_db_url("postgresql://mf:pw@db.example.com/mindflow?sslmode=disable")
    assert url.endswith("?sslmode=disable")
