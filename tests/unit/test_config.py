"""Tests for config.settings and jp_common.logging_setup."""

import logging

import pytest

from config.settings import Settings
from src.jp_common.logging_setup import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("DATABASE_URL", "DEBUG", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        cfg = Settings(_env_file=None)

        assert cfg.DATABASE_URL.startswith("postgresql+asyncpg://")
        assert cfg.DEBUG is False
        assert cfg.LOG_LEVEL == "INFO"

    def test_cors_always_allows_dev_and_frontend(self) -> None:
        cfg = Settings(_env_file=None, CORS_ORIGINS="")
        assert cfg.cors_origin_list == [
            "http://localhost:5173",
            "https://jackpot-frontend-three.vercel.app",
        ]

    def test_cors_list_is_trimmed_and_deduplicated(self) -> None:
        cfg = Settings(
            _env_file=None, CORS_ORIGINS=" https://admin.example.com , http://localhost:5173,"
        )
        assert cfg.cors_origin_list == [
            "https://admin.example.com",
            "http://localhost:5173",
            "https://jackpot-frontend-three.vercel.app",
        ]


class TestConfigureLogging:
    def test_single_handler_with_pipe_format(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug")

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1
            fmt = root.handlers[0].formatter._fmt  # type: ignore[union-attr]
            assert fmt == "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_repeated_calls_do_not_stack_handlers(self) -> None:
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("info")
            configure_logging("info")

            assert len(root.handlers) == 1
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
