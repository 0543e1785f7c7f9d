"""Shared test fixtures for the seamcarve test suite."""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import torch
import pytest
from seamcarve.picture import Picture


def make_gradient_image(H, W, channels=3):
    """Horizontal gradient: dark left, bright right, uint8."""
    grad = torch.linspace(0, 255, W).round().to(torch.uint8).unsqueeze(0).expand(H, W)
    if channels > 0:
        return grad.unsqueeze(0).expand(channels, H, W).clone()
    return grad.clone()


def make_uniform_picture(W, H, color=(120, 40, 200)):
    """Solid-color picture."""
    data = torch.tensor(color, dtype=torch.uint8).view(3, 1, 1).expand(3, H, W)
    return Picture(data.clone())


def make_corridor_picture():
    """5x5 picture whose columns 1-3 share one gray, so column 2 has zero
    interior energy. Column 0 is black and column 4 white."""
    data = torch.full((3, 5, 5), 128, dtype=torch.uint8)
    data[:, :, 0] = 0
    data[:, :, 4] = 255
    return Picture(data)


def make_reference_picture():
    """3x4 picture with hand-computed interior energies 52225 at (1, 1)
    and 52024 at (1, 2)."""
    rows = [
        [(255, 101, 51), (255, 101, 153), (255, 101, 255)],
        [(255, 153, 51), (255, 153, 153), (255, 153, 255)],
        [(255, 203, 51), (255, 204, 153), (255, 205, 255)],
        [(255, 255, 51), (255, 255, 153), (255, 255, 255)],
    ]
    data = torch.tensor(rows, dtype=torch.uint8).permute(2, 0, 1)
    return Picture(data)


def make_random_picture(W, H, seed=42):
    generator = torch.Generator().manual_seed(seed)
    data = torch.randint(0, 256, (3, H, W), dtype=torch.uint8, generator=generator)
    return Picture(data)


@pytest.fixture
def uniform_picture():
    """Uniform 3x3 picture: every pixel is a border pixel."""
    return make_uniform_picture(3, 3)


@pytest.fixture
def corridor_picture():
    return make_corridor_picture()


@pytest.fixture
def reference_picture():
    return make_reference_picture()


@pytest.fixture
def random_picture():
    """Seeded random 12x9 picture."""
    return make_random_picture(12, 9)
