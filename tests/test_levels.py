"""Tests for level loading via LevelLoader."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from pushbox.grid import CellKind
from pushbox.levels import LevelLoader, load_level
from pushbox.moves import Direction
from pushbox.session import PlaySession

EXAMPLE_LEVELS = Path(__file__).parent.parent / "examples" / "levels"


def write_level(directory: Path, name: str, **overrides) -> None:
    document = {
        "name": name,
        "width": 5,
        "height": 3,
        "cells": ["wall"] * 5 + ["wall", "person", "box", "space", "wall"] + ["wall"] * 5,
        "targets": [8],
    }
    document.update(overrides)
    (directory / f"{name}.json").write_text(json.dumps(document))


def test_example_levels_are_listed_and_playable():
    loader = LevelLoader(levels_dir=EXAMPLE_LEVELS)
    names = loader.available()

    assert {"first_push", "two_boxes", "corridor"} <= set(names)
    for name in names:
        grid = loader.load(name)
        assert grid.count(CellKind.PERSON) == 1
        assert len(grid.targets) == grid.count(CellKind.BOX)


def test_first_push_is_solved_in_one_move():
    grid = load_level("first_push", EXAMPLE_LEVELS)
    session = PlaySession(grid)

    session.handle(Direction.RIGHT)

    assert session.solved


def test_corridor_needs_the_gap():
    session = PlaySession(load_level("corridor", EXAMPLE_LEVELS))

    for _ in range(3):
        session.handle(Direction.RIGHT)

    assert session.solved
    assert (session.moves, session.pushes) == (3, 2)


def test_load_data_keeps_metadata(tmp_path):
    write_level(tmp_path, "tiny", description="one push")

    data = LevelLoader(tmp_path).load_data("tiny")

    assert data.name == "tiny"
    assert data.description == "one push"
    assert data.targets == {8}


def test_missing_level_raises_file_not_found(tmp_path):
    with pytest.raises(FileNotFoundError, match="nowhere"):
        LevelLoader(tmp_path).load("nowhere")


def test_missing_directory_lists_nothing(tmp_path):
    assert LevelLoader(tmp_path / "absent").available() == []


def test_malformed_document_is_rejected(tmp_path):
    write_level(tmp_path, "short", cells=["wall"] * 14)

    with pytest.raises(ValidationError):
        LevelLoader(tmp_path).load("short")


def test_open_border_is_rejected(tmp_path):
    write_level(
        tmp_path,
        "leaky",
        cells=["wall"] * 5 + ["space", "person", "box", "space", "wall"] + ["wall"] * 5,
    )

    with pytest.raises(ValueError, match="border"):
        LevelLoader(tmp_path).load("leaky")


def test_unplayable_level_is_rejected(tmp_path):
    write_level(
        tmp_path,
        "crowded",
        cells=["wall"] * 5 + ["wall", "person", "person", "space", "wall"] + ["wall"] * 5,
    )

    with pytest.raises(ValueError, match="only one person"):
        LevelLoader(tmp_path).load("crowded")
