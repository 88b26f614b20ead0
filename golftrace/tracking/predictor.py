"""Lagrange extrapolation of the next club head position."""

from collections.abc import Sequence

import numpy as np

from golftrace.core.errors import InsufficientHistoryError, TimestampOrderError
from golftrace.core.models import Box, TraceSample


def lagrange_basis(times: np.ndarray, t: float) -> np.ndarray:
    """
    Lagrange basis weights for evaluating at t.

    basis[i] = prod_{j != i} (t - times[j]) / (times[i] - times[j])

    Timestamps must be pairwise distinct.
    """
    n = len(times)
    basis = np.ones(n, dtype=np.float64)
    for i in range(n):
        for j in range(n):
            if j != i:
                basis[i] *= (t - times[j]) / (times[i] - times[j])
    return basis


def extrapolate_box(samples: Sequence[TraceSample], t: float) -> Box:
    """
    Predict the head box at time t from recent samples.

    Centers are extrapolated independently per axis; width and height are
    copied from the most recent sample.

    Args:
        samples: Two or three samples with strictly increasing timestamps
        t: Target timestamp

    Returns:
        Predicted box
    """
    if len(samples) < 2:
        raise InsufficientHistoryError(
            f"Extrapolation needs at least 2 samples, got {len(samples)}"
        )

    times = np.array([s.timestamp for s in samples], dtype=np.float64)
    if np.any(np.diff(times) <= 0):
        raise TimestampOrderError(
            "Extrapolation samples must have strictly increasing timestamps"
        )
    xs = np.array([s.box.center_x for s in samples], dtype=np.float64)
    ys = np.array([s.box.center_y for s in samples], dtype=np.float64)

    basis = lagrange_basis(times, t)
    last = samples[-1].box
    return Box(
        center_x=float(basis @ xs),
        center_y=float(basis @ ys),
        width=last.width,
        height=last.height,
    )
