"""
High-level carving: the SeamCarver object and batch helpers.

SeamCarver owns one Picture and replaces it wholesale on every seam
removal. Energy is recomputed from the current picture for every seam
search, so there is no cached state that can go stale after a removal.
Seam arguments are fully validated before the picture is touched; a
failed removal leaves the carver exactly as it was.

Instances are not thread safe.
"""

import logging
import torch
from typing import Union

from .picture import Picture
from .energy import dual_gradient_energy, pixel_energy
from .seam import dp_seam, remove_seam, seam_energy, transpose, validate_seam, SeamLike


logger = logging.getLogger(__name__)


class SeamCarver:
    """
    Content-aware resizing of a W-by-H picture, one seam at a time.

    Example:
        carver = SeamCarver(Picture.from_file('bagel.jpg'))
        for _ in range(50):
            carver.remove_vertical_seam(carver.find_vertical_seam())
        carver.picture().save('bagel_carved.png')
    """

    def __init__(self, picture: Picture):
        if picture is None:
            raise TypeError("picture must not be None")
        # Copy so that later edits to the caller's picture cannot leak in
        self._picture = Picture(picture)
        logger.debug("SeamCarver created for %dx%d picture", self.width(), self.height())

    def picture(self) -> Picture:
        """Current picture."""
        return self._picture

    def width(self) -> int:
        return self._picture.width()

    def height(self) -> int:
        return self._picture.height()

    def energy(self, x: int, y: int) -> float:
        """
        Energy of the pixel at column x and row y.

        Raises:
            IndexError: if (x, y) is outside the current picture
        """
        return pixel_energy(self._picture.tensor, x, y)

    def energy_matrix(self) -> torch.Tensor:
        """Energy of every pixel of the current picture, (H, W) float64."""
        return dual_gradient_energy(self._picture.tensor)

    def find_vertical_seam(self) -> torch.Tensor:
        """
        Sequence of column indices for the minimum-energy vertical seam.

        Returns:
            (H,) long tensor; entry y is the column to remove from row y
        """
        return self._find_seam(self._picture.tensor)

    def find_horizontal_seam(self) -> torch.Tensor:
        """
        Sequence of row indices for the minimum-energy horizontal seam.

        Returns:
            (W,) long tensor; entry x is the row to remove from column x
        """
        return self._find_seam(transpose(self._picture.tensor))

    def _find_seam(self, image: torch.Tensor) -> torch.Tensor:
        energy = dual_gradient_energy(image)
        seam = dp_seam(energy)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Found seam of length %d with energy %.1f",
                         seam.shape[0], seam_energy(energy, seam))
        return seam

    def remove_vertical_seam(self, seam: SeamLike):
        """
        Remove a vertical seam from the current picture.

        Raises:
            TypeError: if seam is None
            ValueError: if the seam has the wrong length, an entry outside
                [0, width), a jump of more than one column, or the picture
                is only one column wide
        """
        seam = validate_seam(seam, self.height(), self.width())
        if self.width() <= 1:
            raise ValueError("Cannot remove a vertical seam from a picture of width 1")

        carved = remove_seam(self._picture.tensor, seam)
        self._install(carved)

    def remove_horizontal_seam(self, seam: SeamLike):
        """
        Remove a horizontal seam from the current picture.

        Raises:
            TypeError: if seam is None
            ValueError: if the seam has the wrong length, an entry outside
                [0, height), a jump of more than one row, or the picture
                is only one row high
        """
        seam = validate_seam(seam, self.width(), self.height())
        if self.height() <= 1:
            raise ValueError("Cannot remove a horizontal seam from a picture of height 1")

        carved = transpose(remove_seam(transpose(self._picture.tensor), seam))
        self._install(carved)

    def _install(self, carved: torch.Tensor):
        # Single assignment: the old picture stays in place until the new one is complete
        self._picture = Picture(carved)
        logger.debug("Picture is now %dx%d", self.width(), self.height())

    def resize(self, width: int, height: int):
        """
        Carve the picture down to width x height.

        Vertical seams are removed first, then horizontal seams.

        Raises:
            ValueError: if the target is larger than the picture or < 1
        """
        if width < 1 or height < 1:
            raise ValueError(f"Target size must be at least 1x1, got {width}x{height}")
        if width > self.width() or height > self.height():
            raise ValueError(f"Cannot grow a {self.width()}x{self.height()} picture "
                             f"to {width}x{height}")

        while self.width() > width:
            self.remove_vertical_seam(self.find_vertical_seam())
        while self.height() > height:
            self.remove_horizontal_seam(self.find_horizontal_seam())


def carve_image(image: Union[torch.Tensor, Picture], n_seams: int,
                direction: str = 'vertical') -> Union[torch.Tensor, Picture]:
    """
    Remove n_seams minimum-energy seams from an image.

    Energy is recomputed after every removal.

    Args:
        image: Picture, or image tensor (C, H, W) or (H, W)
        n_seams: Number of seams to remove
        direction: 'vertical' (narrower) or 'horizontal' (shorter)

    Returns:
        Carved image of the same kind as the input: a Picture for a
        Picture, otherwise a tensor with the input's dtype and layout
    """
    if direction not in ('vertical', 'horizontal'):
        raise ValueError(f"Invalid direction: {direction}")
    if n_seams < 0:
        raise ValueError(f"n_seams must be non-negative, got {n_seams}")

    if isinstance(image, Picture):
        carved = image.tensor.clone()
    else:
        carved = image.clone()

    size = carved.shape[-1] if direction == 'vertical' else carved.shape[-2]
    if n_seams >= size:
        raise ValueError(f"Cannot remove {n_seams} {direction} seams from an image "
                         f"of size {size}")

    for i in range(n_seams):
        energy = dual_gradient_energy(carved)
        seam = dp_seam(energy, direction=direction)
        carved = remove_seam(carved, seam, direction=direction)

    if isinstance(image, Picture):
        return Picture(carved)
    return carved
