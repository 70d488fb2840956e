"""Shared test helpers."""

import pytest

from geonoise.core.module import Module


class RecordingModule(Module):
    """Source module that records every coordinate it is sampled at."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = value
        self.calls: list[tuple[float, float, float]] = []

    def evaluate(self, x: float, y: float, z: float) -> float:
        self.calls.append((x, y, z))
        return self.value


@pytest.fixture
def recorder():
    return RecordingModule()


@pytest.fixture
def make_recorder():
    return RecordingModule
