"""
Picture: the pixel grid that seam carving operates on.

A picture owns a uint8 RGB tensor of shape (3, H, W). Pixel (x, y) is
column x and row y, with (0, 0) in the upper left corner. This is the
opposite of tensor indexing, which is image[:, y, x].
"""

import numpy as np
import torch
from PIL import Image
from typing import Tuple, Union

from .seam import transpose


Color = Tuple[int, int, int]


def _as_rgb_tensor(data: torch.Tensor) -> torch.Tensor:
    """Coerce an image tensor (C, H, W) or (H, W) to uint8 RGB (3, H, W)."""
    if data.dim() == 2:
        data = data.unsqueeze(0)
    if data.dim() != 3:
        raise ValueError(f"Expected a (C, H, W) or (H, W) tensor, got shape {tuple(data.shape)}")

    if data.shape[0] == 1:
        data = data.expand(3, -1, -1)
    elif data.shape[0] != 3:
        raise ValueError(f"Expected 1 or 3 channels, got {data.shape[0]}")

    if data.is_floating_point():
        # Float images live in [0, 1], as everywhere else in the torch stack
        data = (data.clamp(0.0, 1.0) * 255.0).round()
    elif data.dtype not in (torch.uint8, torch.bool) and data.numel() > 0:
        if data.min().item() < 0 or data.max().item() > 255:
            raise ValueError(f"Channel values must lie in [0, 255], got "
                             f"min={data.min().item()}, max={data.max().item()}")

    return data.to(torch.uint8).contiguous()


class Picture:
    """
    A W-by-H RGB picture backed by a torch tensor.

    Supports constant-time width/height/get/set and copy construction:
    Picture(other) makes an independent deep copy.
    """

    def __init__(self, data: Union['Picture', torch.Tensor]):
        """
        Args:
            data: Another Picture (copied) or an image tensor (C, H, W) or (H, W)
        """
        if isinstance(data, Picture):
            self.tensor = data.tensor.clone()
        else:
            self.tensor = _as_rgb_tensor(data).clone()

        if self.tensor.shape[1] < 1 or self.tensor.shape[2] < 1:
            raise ValueError(f"Picture must be at least 1x1, got "
                             f"{self.tensor.shape[2]}x{self.tensor.shape[1]}")

    @classmethod
    def blank(cls, width: int, height: int, device='cpu'):
        """Create an all-black picture of the given size."""
        if width < 1 or height < 1:
            raise ValueError(f"Picture must be at least 1x1, got {width}x{height}")
        return cls(torch.zeros(3, height, width, dtype=torch.uint8, device=device))

    @classmethod
    def from_array(cls, array: np.ndarray, device='cpu'):
        """Create a picture from a numpy array (H, W, 3) or (H, W)."""
        array = np.ascontiguousarray(array)
        tensor = torch.from_numpy(array).to(device)
        if tensor.dim() == 3:
            tensor = tensor.permute(2, 0, 1)
        return cls(tensor)

    @classmethod
    def from_file(cls, path: str, device='cpu'):
        """Load an image file and convert it to an RGB picture."""
        img = Image.open(path).convert('RGB')
        return cls.from_array(np.array(img, dtype=np.uint8), device=device)

    def save(self, path: str):
        """Save the picture as an image file."""
        Image.fromarray(self.to_array()).save(path)

    def to_array(self) -> np.ndarray:
        """Return an (H, W, 3) uint8 numpy copy of the pixels."""
        return self.tensor.permute(1, 2, 0).cpu().numpy().copy()

    def width(self) -> int:
        return self.tensor.shape[2]

    def height(self) -> int:
        return self.tensor.shape[1]

    def _check_coords(self, x: int, y: int):
        if not (0 <= x < self.width()) or not (0 <= y < self.height()):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width()}x{self.height()} picture")

    def get(self, x: int, y: int) -> Color:
        """Color of pixel (x, y) as an (r, g, b) tuple."""
        self._check_coords(x, y)
        r, g, b = self.tensor[:, y, x].tolist()
        return r, g, b

    def set(self, x: int, y: int, color: Color):
        """Set pixel (x, y) to an (r, g, b) color."""
        self._check_coords(x, y)
        if len(color) != 3 or any(not (0 <= int(c) <= 255) for c in color):
            raise ValueError(f"Color must be three channels in [0, 255], got {color}")
        self.tensor[:, y, x] = torch.tensor([int(c) for c in color], dtype=torch.uint8,
                                            device=self.tensor.device)

    def copy(self) -> 'Picture':
        return Picture(self)

    def transpose(self) -> 'Picture':
        """New picture with rows and columns swapped: out(y, x) = in(x, y)."""
        return Picture(transpose(self.tensor))

    def __eq__(self, other):
        if not isinstance(other, Picture):
            return NotImplemented
        return (self.tensor.shape == other.tensor.shape
                and torch.equal(self.tensor.cpu(), other.tensor.cpu()))

    def __repr__(self):
        return f"Picture(width={self.width()}, height={self.height()})"
