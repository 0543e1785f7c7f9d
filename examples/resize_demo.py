"""
Resize an image with seam carving.

Removes vertical seams until the image has the requested width, then
horizontal seams until it has the requested height, and saves the result
next to an overlay of the first seam of each kind.

Usage:
    python resize_demo.py input.jpg 100 50 [output_dir]
"""

import sys
import time
sys.path.insert(0, '..')

from pathlib import Path

from seamcarve import Picture, SeamCarver, seam_overlay


def main():
    if len(sys.argv) < 4:
        print(__doc__)
        sys.exit(1)

    path = sys.argv[1]
    target_width = int(sys.argv[2])
    target_height = int(sys.argv[3])
    out_dir = Path(sys.argv[4] if len(sys.argv) > 4 else '../output')
    out_dir.mkdir(parents=True, exist_ok=True)

    print("Loading image...")
    picture = Picture.from_file(path)
    print(f"Image size: {picture.width()} x {picture.height()}")

    if not (1 <= target_width <= picture.width() and 1 <= target_height <= picture.height()):
        print(f"Target size must be between 1x1 and {picture.width()}x{picture.height()}")
        sys.exit(1)

    carver = SeamCarver(picture)

    seam_overlay(picture, carver.find_vertical_seam()).save(str(out_dir / 'vertical_seam.png'))
    seam_overlay(picture, carver.find_horizontal_seam(),
                 direction='horizontal').save(str(out_dir / 'horizontal_seam.png'))

    start = time.time()
    removed = 0
    while carver.width() > target_width:
        carver.remove_vertical_seam(carver.find_vertical_seam())
        removed += 1
        if removed % 20 == 0:
            print(f"  Removed {removed} vertical seams")

    removed = 0
    while carver.height() > target_height:
        carver.remove_horizontal_seam(carver.find_horizontal_seam())
        removed += 1
        if removed % 20 == 0:
            print(f"  Removed {removed} horizontal seams")

    print(f"New size: {carver.width()} x {carver.height()} "
          f"({time.time() - start:.2f}s)")

    carver.picture().save(str(out_dir / 'carved.png'))
    print(f"Saved: {out_dir / 'carved.png'}")


if __name__ == '__main__':
    main()
