"""
Seam computation and removal.

A vertical seam is a path of pixels from the top row to the bottom row,
one pixel per row, where consecutive pixels are at most one column apart.
It is stored as a (H,) long tensor holding the column index for each row.
A horizontal seam is the same thing on the transposed image: (W,) row
indices, one per column.

Finding the minimum-energy seam is a shortest path problem on an implicit
DAG weighted on vertices: each pixel (x, y) has edges down to (x-1, y+1),
(x, y+1) and (x+1, y+1). Rows are already in topological order, so one
top-to-bottom dynamic programming pass solves it in O(W*H). Horizontal
seams reuse the vertical code through transpose().
"""

import torch
from typing import Sequence, Union


SeamLike = Union[torch.Tensor, Sequence[int]]


class SeamInvariantError(RuntimeError):
    """The seam search reached a state that valid input cannot produce."""


def transpose(image: torch.Tensor) -> torch.Tensor:
    """
    Swap rows and columns: out[..., x, y] = image[..., y, x].

    Always returns a new contiguous tensor; the input is never aliased,
    even when one side has length 1.

    Args:
        image: Image tensor (C, H, W) or energy/grayscale map (H, W)

    Returns:
        Tensor (C, W, H) or (W, H)
    """
    if image.dim() not in (2, 3):
        raise ValueError(f"Expected a 2D or 3D tensor, got shape {tuple(image.shape)}")
    return image.transpose(-2, -1).clone(memory_format=torch.contiguous_format)


def validate_seam(seam: SeamLike, length: int, bound: int) -> torch.Tensor:
    """
    Check that a seam can be removed from an image.

    Args:
        seam: Seam indices (list, tuple, numpy array or tensor)
        length: Required number of entries (H for vertical seams)
        bound: Entries must lie in [0, bound) (W for vertical seams)

    Returns:
        The seam as a (length,) long tensor on the CPU

    Raises:
        TypeError: if seam is None
        ValueError: on wrong shape, wrong length, out-of-range entries or
            consecutive entries more than one apart
    """
    if seam is None:
        raise TypeError("seam must not be None")

    seam = torch.as_tensor(seam)
    if seam.dim() != 1:
        raise ValueError(f"Seam must be one-dimensional, got shape {tuple(seam.shape)}")
    if seam.shape[0] != length:
        raise ValueError(f"Seam has length {seam.shape[0]}, expected {length}")
    if seam.is_floating_point() or seam.is_complex() or seam.dtype == torch.bool:
        raise ValueError(f"Seam entries must be integers, got {seam.dtype}")

    seam = seam.to(device='cpu', dtype=torch.long)
    if (seam < 0).any() or (seam >= bound).any():
        raise ValueError(f"Seam entries must lie in [0, {bound}), got "
                         f"min={seam.min().item()}, max={seam.max().item()}")
    if length > 1 and (seam[1:] - seam[:-1]).abs().max() > 1:
        raise ValueError("Consecutive seam entries differ by more than 1")

    return seam


def dp_seam(energy: torch.Tensor, direction: str = 'vertical') -> torch.Tensor:
    """
    Find the minimum total energy seam by dynamic programming.

    dist_to[y, x] is the least energy of any path from row 0 to (x, y) and
    edge_to[y, x] the column of its predecessor in row y - 1. Each row is
    relaxed from the one above in a single vectorized step; within a row,
    ties between predecessors go to the leftmost column (x-1 before x
    before x+1). Ties in the bottom row also go to the smallest column.

    Args:
        energy: Energy map (H, W)
        direction: 'vertical' or 'horizontal'

    Returns:
        Seam indices - for vertical: (H,) with column index per row
                      for horizontal: (W,) with row index per column
    """
    if direction == 'horizontal':
        return dp_seam(transpose(energy), direction='vertical')
    elif direction != 'vertical':
        raise ValueError(f"Invalid direction: {direction}")

    H, W = energy.shape
    device = energy.device
    energy = energy.to(torch.float64)

    dist_to = torch.empty(H, W, dtype=torch.float64, device=device)
    edge_to = torch.zeros(H, W, dtype=torch.long, device=device)
    dist_to[0] = energy[0]

    cols = torch.arange(W, device=device)
    inf = float('inf')

    for y in range(H - 1):
        prev = dist_to[y]
        below = energy[y + 1]

        # Candidate distances for target column x coming from x-1, x, x+1
        from_left = torch.full((W,), inf, dtype=torch.float64, device=device)
        from_left[1:] = prev[:-1] + below[1:]
        from_center = prev + below
        from_right = torch.full((W,), inf, dtype=torch.float64, device=device)
        from_right[:-1] = prev[1:] + below[:-1]

        # Left wins ties with center, center wins ties with right. Column 0
        # has no left candidate, so its predecessor is always a real column.
        best = from_center
        best_col = cols
        left_wins = (cols > 0) & (from_left <= from_center)
        best = torch.where(left_wins, from_left, best)
        best_col = torch.where(left_wins, cols - 1, best_col)
        right_wins = from_right < best
        best = torch.where(right_wins, from_right, best)
        best_col = torch.where(right_wins, cols + 1, best_col)

        dist_to[y + 1] = best
        edge_to[y + 1] = best_col

    last = dist_to[H - 1]
    minima = (last == last.min()).nonzero()
    if minima.numel() == 0:
        raise SeamInvariantError("No minimum in the bottom row of the distance table")
    min_x = int(minima[0, 0].item())

    edges = edge_to.tolist()
    seam = [0] * H
    x = min_x
    for y in range(H - 1, -1, -1):
        if not 0 <= x < W:
            raise SeamInvariantError(f"Backtrace reached column {x} at row {y} (width {W})")
        seam[y] = x
        x = edges[y][x]

    return torch.tensor(seam, dtype=torch.long, device=device)


def seam_energy(energy: torch.Tensor, seam: torch.Tensor) -> float:
    """Total energy of a vertical seam on an (H, W) energy map."""
    rows = torch.arange(energy.shape[0], device=energy.device)
    return float(energy[rows, seam.to(energy.device)].sum().item())


def remove_seam(image: torch.Tensor, seam: SeamLike,
                direction: str = 'vertical') -> torch.Tensor:
    """
    Remove a seam from an image.

    Every row keeps its remaining pixels in their original left-to-right
    order. The input tensor is not modified.

    Args:
        image: Image tensor (C, H, W) or (H, W)
        seam: Seam indices
        direction: 'vertical' or 'horizontal'

    Returns:
        Carved image with one column (vertical) or row (horizontal) removed

    Raises:
        TypeError, ValueError: if the seam is invalid for this image
    """
    if direction == 'horizontal':
        return transpose(remove_seam(transpose(image), seam, direction='vertical'))
    elif direction != 'vertical':
        raise ValueError(f"Invalid direction: {direction}")

    if image.dim() == 2:
        # Grayscale
        image = image.unsqueeze(0)
        squeeze_output = True
    else:
        squeeze_output = False

    C, H, W = image.shape
    seam = validate_seam(seam, H, W)
    if W <= 1:
        raise ValueError("Cannot remove a vertical seam from an image of width 1")

    keep = torch.ones(H, W, dtype=torch.bool, device=image.device)
    keep[torch.arange(H, device=image.device), seam.to(image.device)] = False
    carved = image[:, keep].reshape(C, H, W - 1)

    if squeeze_output:
        carved = carved.squeeze(0)

    return carved
