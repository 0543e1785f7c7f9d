"""
Show an image, its dual gradient energy, and its next vertical seam.

Usage:
    python show_energy.py input.jpg
"""

import sys
sys.path.insert(0, '..')

import matplotlib.pyplot as plt

from seamcarve import Picture, SeamCarver, energy_picture, seam_overlay


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    picture = Picture.from_file(sys.argv[1])
    carver = SeamCarver(picture)
    seam = carver.find_vertical_seam()

    energy = carver.energy_matrix()
    print(f"Energy range: {energy.min().item():.0f} .. {energy.max().item():.0f}")

    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    axes[0].imshow(picture.to_array())
    axes[0].set_title('Original')
    axes[1].imshow(energy_picture(picture).to_array())
    axes[1].set_title('Dual gradient energy')
    axes[2].imshow(seam_overlay(energy_picture(picture), seam).to_array())
    axes[2].set_title('Minimum-energy vertical seam')
    for ax in axes:
        ax.axis('off')

    plt.tight_layout()
    plt.show()


if __name__ == '__main__':
    main()
