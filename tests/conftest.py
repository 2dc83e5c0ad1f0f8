"""Test configuration for pytest."""

from __future__ import annotations

from pathlib import Path

import pytest

from nupkg_builder.domain import CoreInfo, OptionalInfo


# ============================================================================
# Source tree fixtures
# ============================================================================


@pytest.fixture
def working_dir(tmp_path: Path) -> Path:
    """Provide a working directory holding a small build output tree.

    Layout:
        bin/a.dll
        bin/sub/b.txt
    """
    root = tmp_path / "work"
    (root / "bin" / "sub").mkdir(parents=True)
    (root / "bin" / "a.dll").write_bytes(b"MZ-a")
    (root / "bin" / "sub" / "b.txt").write_text("b", encoding="utf-8")
    return root


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide an empty output directory for package archives."""
    out = tmp_path / "out"
    out.mkdir()
    return out


# ============================================================================
# Package information fixtures
# ============================================================================


@pytest.fixture
def core_info() -> CoreInfo:
    """Provide CoreInfo for package Foo 1.0.0."""
    return CoreInfo.create(id="Foo", version="1.0.0", description="Foo package", authors=["Alice", "Bob"])


@pytest.fixture
def unversioned_core_info() -> CoreInfo:
    """Provide CoreInfo without a version."""
    return CoreInfo.create(id="Foo", version=None, description="Foo package", authors=["Alice"])


@pytest.fixture
def bin_mapping() -> OptionalInfo:
    """Provide OptionalInfo mapping the bin directory to the archive root."""
    return OptionalInfo(files=[("bin", "")])
