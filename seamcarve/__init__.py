"""
Content-aware image resizing by seam carving.

Uses the dual gradient energy function and a dynamic programming
shortest-path search for the minimum-energy seam (Avidan & Shamir 2007).
"""

__version__ = "0.1.0"

from .picture import Picture
from .energy import (BORDER_ENERGY, dual_gradient_energy, pixel_energy,
                     normalize_energy)
from .seam import (SeamInvariantError, dp_seam, remove_seam, transpose,
                   validate_seam, seam_energy)
from .carver import SeamCarver, carve_image
from .visualize import energy_picture, seam_overlay

__all__ = [
    'Picture',
    'BORDER_ENERGY',
    'dual_gradient_energy',
    'pixel_energy',
    'normalize_energy',
    'SeamInvariantError',
    'dp_seam',
    'remove_seam',
    'transpose',
    'validate_seam',
    'seam_energy',
    'SeamCarver',
    'carve_image',
    'energy_picture',
    'seam_overlay',
]
