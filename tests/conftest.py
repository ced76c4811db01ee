"""Shared test fixtures for equalfile."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def equal_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create two distinct files with identical content."""
    left = tmp_path / "left.txt"
    right = tmp_path / "right.txt"
    left.write_text("same content\nacross several lines\n")
    right.write_text("same content\nacross several lines\n")
    return left, right


@pytest.fixture
def modified_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create two files of equal size that differ in the last byte."""
    left = tmp_path / "left.bin"
    right = tmp_path / "right.bin"
    left.write_bytes(b"identical prefix\x00")
    right.write_bytes(b"identical prefix\x01")
    return left, right


@pytest.fixture
def resized_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create two files where one is a strict prefix of the other."""
    left = tmp_path / "short.txt"
    right = tmp_path / "long.txt"
    left.write_bytes(b"hello")
    right.write_bytes(b"hello world")
    return left, right


@pytest.fixture
def prefix_files(tmp_path: Path) -> tuple[Path, Path]:
    """Create two same-size files equal only in their first five bytes.

    Left:  aaaaaxxxxx
    Right: aaaaayyyyy
    """
    left = tmp_path / "partial_0"
    right = tmp_path / "partial_1"
    left.write_bytes(b"aaaaaxxxxx")
    right.write_bytes(b"aaaaayyyyy")
    return left, right


@pytest.fixture
def file_set(tmp_path: Path) -> tuple[Path, Path, Path]:
    """Create three files: two identical and one different of the same size."""
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    third = tmp_path / "third.txt"
    first.write_text("shared\n")
    second.write_text("shared\n")
    third.write_text("unique\n")
    return first, second, third
