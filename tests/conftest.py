from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from typesafe_enum.config.models import EnumSettings
from typesafe_enum.config.runtime import configure, get_settings


@pytest.fixture(autouse=True)
def restore_settings() -> Iterator[EnumSettings]:
    """Every test starts from and returns to the default settings."""

    previous = configure(EnumSettings())
    yield get_settings()
    configure(previous)


@pytest.fixture
def isolated_logger_name(request: pytest.FixtureRequest) -> Iterator[str]:
    name = f"typesafe_enum_test.{request.node.name}"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


@pytest.fixture
def config_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    return tmp_path_factory.mktemp("config")
