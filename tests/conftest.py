import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Keep the sources importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def gradient_pixels() -> np.ndarray:
    """A deterministic 3x4 RGBA array covering the whole 8-bit range."""

    values = np.linspace(0, 255, num=3 * 4 * 3).round().astype(np.uint8)
    rgb = values.reshape((3, 4, 3))
    alpha = np.full((3, 4, 1), 200, dtype=np.uint8)
    return np.concatenate([rgb, alpha], axis=2)
