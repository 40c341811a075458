"""Shared fixtures for the PassForge test suite."""

from __future__ import annotations

import io
from typing import Callable, Iterable

import pytest

from shared.config import ForgeConfig
from shared.console import ForgeConsole
from shared.logger import ForgeLogger
from passforge.core.engine import PassForgeEngine


@pytest.fixture
def quiet_logger() -> ForgeLogger:
    return ForgeLogger("test", console_output=False)


@pytest.fixture
def config() -> ForgeConfig:
    return ForgeConfig()


@pytest.fixture
def engine(config: ForgeConfig, quiet_logger: ForgeLogger) -> PassForgeEngine:
    return PassForgeEngine(config, logger=quiet_logger)


@pytest.fixture
def console() -> ForgeConsole:
    return ForgeConsole(record=True, file=io.StringIO())


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Build a line reader that replays *lines* and then signals EOF."""

    def factory(lines: Iterable[str]) -> Callable[[str], str]:
        remaining = iter(lines)

        def read(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return read

    return factory
