"""Shared fixtures: guides are built into a temporary directory per test."""

import pytest
from guide_builder import example_guide
from nortonguide.lib.guide import Guide


@pytest.fixture
def write_guide(tmp_path):
    """Writes guide bytes to a file and returns its path."""

    def write(data: bytes, name: str = "test.ng") -> str:
        path = tmp_path / name
        path.write_bytes(data)
        return str(path)

    return write


@pytest.fixture
def example_guide_path(write_guide):
    return write_guide(example_guide(), "eg.ng")


@pytest.fixture
def guide(example_guide_path):
    return Guide(example_guide_path).open()
