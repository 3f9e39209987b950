"""Shared fixtures: scheme and template trees on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
import yaml

NORD: dict[str, str] = {
    "scheme": "Nord",
    "author": "Arctic",
    "base00": "2e3440",
    "base01": "3b4252",
    "base02": "434c5e",
    "base03": "4c566a",
    "base04": "d8dee9",
    "base05": "e5e9f0",
    "base06": "eceff4",
    "base07": "8fbcbb",
    "base08": "bf616a",
    "base09": "d08770",
    "base0A": "ebcb8b",
    "base0B": "a3be8c",
    "base0C": "88c0d0",
    "base0D": "81a1c1",
    "base0E": "b48ead",
    "base0F": "5e81ac",
}


def make_palette(display_name: str, author: str = "Tester", **overrides: str) -> dict[str, str]:
    palette = {**NORD, "scheme": display_name, "author": author}
    palette.update(overrides)
    return palette


@pytest.fixture
def schemes_dir(tmp_path: Path) -> Path:
    path = tmp_path / "schemes"
    path.mkdir()
    return path


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    path = tmp_path / "templates"
    path.mkdir()
    return path


@pytest.fixture
def write_scheme(schemes_dir: Path) -> Callable[..., Path]:
    def _write(name: str, data: dict[str, Any]) -> Path:
        path = schemes_dir / f"{name}.yaml"
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_template(templates_dir: Path) -> Callable[..., Path]:
    def _write(name: str, source: str) -> Path:
        path = templates_dir / f"{name}.mustache"
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_config(templates_dir: Path) -> Callable[..., Path]:
    def _write(config: dict[str, Any]) -> Path:
        path = templates_dir / "config.yaml"
        path.write_text(yaml.safe_dump(config), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def nord() -> dict[str, str]:
    return dict(NORD)


@pytest.fixture
def palette() -> Callable[..., dict[str, str]]:
    return make_palette
