"""Shared test fixtures for frame layout tests."""
import pytest
from shared.types import FrameSpec
from frame.layout import compute_frame_layout


@pytest.fixture(scope="session")
def square_spec():
    """48" x 48" rectangular frame at 4" ideal spacing."""
    return FrameSpec(width=48, height=48, ideal_spacing=4)


@pytest.fixture(scope="session")
def square_layout(square_spec):
    return compute_frame_layout(square_spec)


@pytest.fixture(scope="session")
def arched_spec():
    """48" wide, 36" sides, 10" arch rise, 4" ideal spacing."""
    return FrameSpec(width=48, height=36, ideal_spacing=4, arched=True, arch_rise=10)


@pytest.fixture(scope="session")
def arched_layout(arched_spec):
    return compute_frame_layout(arched_spec)
