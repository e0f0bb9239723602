"""
Pytest configuration and shared fixtures.

This file is automatically discovered by pytest and provides fixtures
available to all test files.
"""

import importlib.util
from pathlib import Path
from types import ModuleType
from typing import Generator

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """
    Put the project logger back the way it was after each test.
    Tests that apply a config change the console level and may add file handlers.
    """
    from engine.error_handler import console_handler, disable_file_logging
    level = console_handler.level
    yield
    disable_file_logging()
    console_handler.setLevel(level)


@pytest.fixture
def registry():
    """
    The process-wide enchantment registry.
    """
    from systems.enchantments import get_registry
    return get_registry()


@pytest.fixture
def sample_enchantments():
    """
    A small, clean set of enchantment records for building private registries.
    """
    from systems.enchantments import EnchantmentType
    return [
        EnchantmentType(key="SPARK", id=1, name="Spark", aliases=("spark", "zap")),
        EnchantmentType(key="FROST", id=5, name="Frost", aliases=("frost", "Chill")),
    ]


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """
    Path of a settings.json inside a temporary directory (not created).
    """
    return tmp_path / "config" / "settings.json"


@pytest.fixture
def enchantment_table() -> ModuleType:
    """
    The tools/enchantment_table.py script loaded as a module.
    """
    path = PROJECT_ROOT / "tools" / "enchantment_table.py"
    spec = importlib.util.spec_from_file_location("enchantment_table", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module
