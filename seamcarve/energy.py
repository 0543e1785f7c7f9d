"""
Energy functions for seam carving.

The energy function determines which pixels are "important".
Low-energy seams are preferred for removal.

We use the dual gradient energy: the squared x-gradient plus the squared
y-gradient, each a sum over color channels of central differences:

    Dx^2(x, y) = sum_c (I_c(x+1, y) - I_c(x-1, y))^2
    Dy^2(x, y) = sum_c (I_c(x, y-1) - I_c(x, y+1))^2
    E(x, y)    = Dx^2(x, y) + Dy^2(x, y)

Border pixels have no complete neighborhood and get the fixed energy
255^2 + 255^2 + 255^2 = 195075, the largest value the gradient can reach
for one axis of 8-bit RGB.
"""

import torch


BORDER_ENERGY = 3.0 * 255 * 255


def _pixels(image: torch.Tensor) -> torch.Tensor:
    """(C, H, W) view of the image in a dtype that cannot overflow."""
    if image.dim() == 2:
        image = image.unsqueeze(0)
    if image.is_floating_point():
        return image.to(torch.float64)
    return image.to(torch.int64)


def dual_gradient_energy(image: torch.Tensor) -> torch.Tensor:
    """
    Compute the dual gradient energy of every pixel.

    The whole field is recomputed on every call; callers that carve
    iteratively must call this again after each removal.

    Args:
        image: RGB image tensor (C, H, W) or grayscale (H, W)

    Returns:
        Energy map (H, W), float64
    """
    pixels = _pixels(image)
    C, H, W = pixels.shape

    energy = torch.full((H, W), BORDER_ENERGY, dtype=torch.float64, device=pixels.device)

    # Images of width or height <= 2 are all border
    if H > 2 and W > 2:
        dx = pixels[:, 1:-1, 2:] - pixels[:, 1:-1, :-2]
        dy = pixels[:, :-2, 1:-1] - pixels[:, 2:, 1:-1]
        interior = (dx * dx).sum(dim=0) + (dy * dy).sum(dim=0)
        energy[1:-1, 1:-1] = interior.to(torch.float64)

    return energy


def is_border_pixel(x: int, y: int, width: int, height: int) -> bool:
    return x == 0 or y == 0 or x == width - 1 or y == height - 1


def pixel_energy(image: torch.Tensor, x: int, y: int) -> float:
    """
    Dual gradient energy of the single pixel at column x, row y.

    Constant time; agrees exactly with dual_gradient_energy(image)[y, x].

    Raises:
        IndexError: if (x, y) lies outside the image
    """
    if image.dim() == 2:
        image = image.unsqueeze(0)
    H, W = image.shape[-2:]

    if not (0 <= x < W) or not (0 <= y < H):
        raise IndexError(f"Pixel ({x}, {y}) outside {W}x{H} image")

    if is_border_pixel(x, y, W, H):
        return BORDER_ENERGY

    # Only the four neighbors are widened, not the whole image
    left, right = _pixels(image[:, y, x - 1]), _pixels(image[:, y, x + 1])
    up, down = _pixels(image[:, y - 1, x]), _pixels(image[:, y + 1, x])
    dx = right - left
    dy = up - down
    return float((dx * dx).sum().item() + (dy * dy).sum().item())


def normalize_energy(energy: torch.Tensor, eps: float = 1e-8) -> torch.Tensor:
    """Remap energy to [0, 1] range.

    This is a monotonic transform, used for display only. Seam finding
    always works on the raw energy.

    Args:
        energy: Energy map (H, W)
        eps: Small value to avoid division by zero

    Returns:
        Normalized energy map in [0, 1]
    """
    e_min = energy.min()
    e_max = energy.max()
    return (energy - e_min) / (e_max - e_min + eps)
