"""Image Export — renders a BarcodeMatrix as a black-and-white PNG.

Invariants:
    - Dark modules are black (0), light modules white (255)
    - Output pixel size = matrix size * module_px on each axis
"""

import io

from PIL import Image

from loyalty_wallet.core.module_matrix import BarcodeMatrix


def render_image(matrix: BarcodeMatrix, module_px: int = 1) -> Image.Image:
    if module_px < 1:
        raise ValueError(f"module_px must be >= 1, got {module_px}")
    image = Image.new("1", (matrix.width, matrix.height), 255)
    image.putdata([0 if dark else 255 for row in matrix.rows for dark in row])
    if module_px > 1:
        image = image.resize(
            (matrix.width * module_px, matrix.height * module_px),
            Image.Resampling.NEAREST,
        )
    return image


def render_png(matrix: BarcodeMatrix, module_px: int = 1) -> bytes:
    buffer = io.BytesIO()
    render_image(matrix, module_px).save(buffer, format="PNG")
    return buffer.getvalue()
