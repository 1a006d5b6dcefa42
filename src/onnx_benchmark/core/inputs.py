"""
Random input synthesis for benchmark runs.
"""

from typing import Optional

import numpy as np

from .errors import InvalidShapeError
from .model_info import ModelInputSpec


def create_generator(seed: Optional[int] = None) -> np.random.Generator:
    """Create the random generator owned by one benchmark run.

    Args:
        seed: Fixed seed for reproducible inputs, or None to draw OS entropy
    """
    return np.random.default_rng(seed)


def synthesize_input(
    spec: ModelInputSpec,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> np.ndarray:
    """Build a float32 input tensor conforming to ``spec``.

    Dynamic axes (``<= 0``) are resolved to 1, so batch dimensions are not
    exercised beyond a single item. Values are uniform in [0.0, 1.0).

    Args:
        spec: Input contract reported by the probe
        rng: Generator to draw from; one is created from ``seed`` if omitted
        seed: Seed used only when ``rng`` is None

    Returns:
        Contiguous float32 array shaped to ``spec.resolved_shape``

    Raises:
        InvalidShapeError: if the resolved shape holds no elements
    """
    element_count = spec.element_count
    if element_count == 0:
        raise InvalidShapeError(
            f"Input {spec.name!r} with shape {list(spec.shape)} has zero elements"
        )

    if rng is None:
        rng = create_generator(seed)

    values = rng.random(element_count, dtype=np.float32)
    return np.ascontiguousarray(values.reshape(spec.resolved_shape))
