"""Head selection policy, one handler per history state."""

import logging
from collections.abc import Sequence
from enum import Enum

from golftrace.core.geometry import center_distance
from golftrace.core.models import Box, TraceSample
from golftrace.tracking.predictor import extrapolate_box

logger = logging.getLogger(__name__)


class SelectionState(str, Enum):
    """How much trace history is available for picking a head."""

    INITIALIZING = "initializing"  # No accepted samples yet
    SINGLE_SAMPLE = "single_sample"  # Exactly one sample
    ESTABLISHED = "established"  # Two or more, extrapolation possible

    @classmethod
    def from_history_length(cls, n: int) -> "SelectionState":
        if n == 0:
            return cls.INITIALIZING
        if n == 1:
            return cls.SINGLE_SAMPLE
        return cls.ESTABLISHED


def _farthest(candidates: Sequence[Box], point: tuple[float, float]) -> Box:
    # max() keeps the first of equal keys
    return max(candidates, key=lambda c: center_distance(c.center, point))


def _nearest(candidates: Sequence[Box], point: tuple[float, float]) -> Box:
    return min(candidates, key=lambda c: center_distance(c.center, point))


class HeadSelector:
    """
    Picks the club head among filtered candidates.

    INITIALIZING takes the candidate farthest from the club center (the head
    sits at the far end of the shaft). SINGLE_SAMPLE takes the candidate
    nearest the previous head. ESTABLISHED extrapolates the last two or three
    samples to the frame time and takes the candidate nearest the prediction.
    """

    def __init__(self, max_prediction_samples: int = 3):
        self.max_prediction_samples = max_prediction_samples
        self._handlers = {
            SelectionState.INITIALIZING: self._select_initializing,
            SelectionState.SINGLE_SAMPLE: self._select_single_sample,
            SelectionState.ESTABLISHED: self._select_established,
        }

    def select(
        self,
        candidates: Sequence[Box],
        club: Box,
        history: Sequence[TraceSample],
        timestamp: float,
    ) -> Box:
        """
        Choose one head box.

        Args:
            candidates: Non-empty list of filtered head boxes
            club: Current club anchor
            history: Accepted trace samples so far
            timestamp: Time of the frame being processed

        Returns:
            The selected candidate
        """
        if not candidates:
            raise ValueError("select() requires at least one candidate")
        state = SelectionState.from_history_length(len(history))
        return self._handlers[state](candidates, club, history, timestamp)

    def _select_initializing(self, candidates, club, history, timestamp) -> Box:
        return _farthest(candidates, club.center)

    def _select_single_sample(self, candidates, club, history, timestamp) -> Box:
        return _nearest(candidates, history[-1].box.center)

    def _select_established(self, candidates, club, history, timestamp) -> Box:
        steps = min(self.max_prediction_samples, len(history))
        prediction = extrapolate_box(history[-steps:], timestamp)
        logger.debug(f"Predicted head at {prediction.center} from {steps} samples")
        return _nearest(candidates, prediction.center)
