"""
Rendering helpers: energy maps and seam overlays as pictures.
"""

import torch
from typing import Tuple

from .picture import Picture
from .energy import dual_gradient_energy, normalize_energy
from .seam import validate_seam


def energy_picture(picture: Picture) -> Picture:
    """Grayscale picture of the energy map, brightest where energy is highest."""
    energy = normalize_energy(dual_gradient_energy(picture.tensor))
    gray = (energy * 255.0).round().to(torch.uint8)
    return Picture(gray)


def seam_overlay(picture: Picture, seam, direction: str = 'vertical',
                 color: Tuple[int, int, int] = (255, 0, 0)) -> Picture:
    """
    Copy of the picture with a seam painted in a solid color.

    Args:
        picture: Picture to draw on (not modified)
        seam: Vertical seam (one column per row) or horizontal seam
            (one row per column)
        direction: 'vertical' or 'horizontal'
        color: (r, g, b) paint color

    Returns:
        New Picture with the seam pixels replaced by color
    """
    W, H = picture.width(), picture.height()
    if direction == 'vertical':
        seam = validate_seam(seam, H, W)
        rows = torch.arange(H)
        cols = seam
    elif direction == 'horizontal':
        seam = validate_seam(seam, W, H)
        rows = seam
        cols = torch.arange(W)
    else:
        raise ValueError(f"Invalid direction: {direction}")

    img_vis = picture.copy()
    device = img_vis.tensor.device
    paint = torch.tensor(color, dtype=torch.uint8, device=device).unsqueeze(1)
    img_vis.tensor[:, rows.to(device), cols.to(device)] = paint
    return img_vis
