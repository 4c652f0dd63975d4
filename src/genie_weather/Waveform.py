"""Deterministic sample sources standing in for real sensors."""
import math
from typing import Protocol, runtime_checkable


@runtime_checkable
class SampleSource(Protocol):
    """Protocol for anything a simulator can pull samples from.

    This protocol uses structural typing - any class implementing
    next_sample() satisfies it without explicit inheritance.
    """

    def next_sample(self) -> int:
        """Produce the sample for the current tick and advance."""
        ...


class SineWaveform:
    """
    value = round(scale * (sin(phase) + 1) + offset)

    The phase starts at `phase` degrees and advances by `step` degrees per
    sample, wrapping at 360.
    """

    def __init__(
        self,
        scale: float,
        offset: float,
        step: float = 1.0,
        phase: float = 0.0
    ) -> None:
        self.scale = scale
        self.offset = offset
        self.step = step
        self.phase = phase % 360.0

    def peek(self) -> int:
        return round(self.scale * (math.sin(math.radians(self.phase)) + 1.0) + self.offset)

    def next_sample(self) -> int:
        value = self.peek()
        self.phase = (self.phase + self.step) % 360.0

        return value

    @classmethod
    def temperature(cls) -> 'SineWaveform':
        """Roughly -10 to 40 degrees celsius."""
        return cls(scale=25.0, offset=-10.0)

    @classmethod
    def pressure(cls) -> 'SineWaveform':
        """Roughly 940 to 1060 hPa."""
        return cls(scale=60.0, offset=940.0)
