"""Slot transitions -- easing curves and a clock-driven position tween.

The controller emits discrete slot offsets. When the order or the
placeholder changes, each slot glides from where it is drawn now to its
new offset instead of jumping:

    before:   [A] [B] [C] [D]          placeholder appears at 1
    frame 3:  [A]  [B]  [C]  [D]
    settled:  [A]  ___  [B]  [C]  [D]

Time is passed in explicitly (monotonic microseconds) so the math stays
testable without a main loop.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, Mapping

Easing = Callable[[float], float]

US_PER_MS = 1000


def linear(t: float) -> float:
    return t


def ease_out(t: float) -> float:
    """Cubic ease-out: fast start, gentle landing."""
    inv = 1.0 - t
    return 1.0 - inv * inv * inv


def ease_in_out(t: float) -> float:
    """Cubic ease-in-out: slow at both ends."""
    if t < 0.5:
        return 4.0 * t * t * t
    inv = -2.0 * t + 2.0
    return 1.0 - inv * inv * inv / 2.0


@dataclass
class _Track:
    start: float
    target: float
    started_us: int
    easing: Easing


class SlotTween:
    """Per-key position tween with a fixed duration.

    A duration of 0 disables animation: every position snaps to its
    target (the plain row layout).
    """

    def __init__(self, duration_ms: int = 300) -> None:
        self.duration_us = max(duration_ms, 0) * US_PER_MS
        self._tracks: dict[Hashable, _Track] = {}

    def _progress(self, track: _Track, now_us: int) -> float:
        if self.duration_us == 0:
            return 1.0
        elapsed = now_us - track.started_us
        return min(max(elapsed / self.duration_us, 0.0), 1.0)

    def value(self, key: Hashable, now_us: int) -> float | None:
        """Position of `key` at `now_us`, or None for an unknown key."""
        track = self._tracks.get(key)
        if track is None:
            return None
        p = track.easing(self._progress(track, now_us))
        return track.start + (track.target - track.start) * p

    def retarget(
        self,
        targets: Mapping[Hashable, float],
        now_us: int,
        easing: Easing = ease_out,
        easings: Mapping[Hashable, Easing] | None = None,
    ) -> None:
        """Aim every key at a new position, starting from where it is now.

        Keys not seen before appear directly at their target. Keys missing
        from `targets` are forgotten.
        """
        easings = easings or {}
        tracks: dict[Hashable, _Track] = {}
        for key, target in targets.items():
            current = self.value(key, now_us)
            curve = easings.get(key, easing)
            if current is None:
                tracks[key] = _Track(target, target, now_us, curve)
            elif self._tracks[key].target == target:
                tracks[key] = self._tracks[key]
            else:
                tracks[key] = _Track(current, target, now_us, curve)
        self._tracks = tracks

    def positions(self, now_us: int) -> dict[Hashable, float]:
        positions: dict[Hashable, float] = {}
        for key in self._tracks:
            value = self.value(key, now_us)
            if value is not None:
                positions[key] = value
        return positions

    def running(self, now_us: int) -> bool:
        """True while any key has not reached its target."""
        return any(
            self._progress(track, now_us) < 1.0 and track.start != track.target
            for track in self._tracks.values()
        )
