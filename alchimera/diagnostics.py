"""Runtime diagnostics metrics and overlay state."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace

_U32_MAX = (1 << 32) - 1


def _round_to_unsigned(value: float, upper: int | None = None) -> int:
    """Round half away from zero and saturate into the unsigned range."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return 0 if value < 0 else (upper if upper is not None else 0)
    rounded = math.floor(abs(value) + 0.5)
    if value < 0:
        return 0
    if upper is not None:
        rounded = min(rounded, upper)
    return int(rounded)


@dataclass
class RuntimeDiagnostics:
    """Lightweight runtime metrics shown by the diagnostics overlay."""

    fps: int | None = None
    frame_time_ms: int | None = None
    entity_count: int = 0
    active_chunks: int = 0
    queued_chunks: int = 0

    def update_from_measurements(
        self,
        fps: float | None,
        frame_time_ms: float | None,
        entity_count: float | None,
    ) -> None:
        """Store rounded measurements; a missing entity count keeps the last one."""
        self.fps = None if fps is None else _round_to_unsigned(fps, _U32_MAX)
        self.frame_time_ms = (
            None if frame_time_ms is None else _round_to_unsigned(frame_time_ms, _U32_MAX)
        )
        if entity_count is not None:
            self.entity_count = _round_to_unsigned(entity_count)


@dataclass
class DiagnosticsOverlay:
    """User-facing diagnostics overlay state."""

    visible: bool = False
    metrics: RuntimeDiagnostics = field(default_factory=RuntimeDiagnostics)

    def toggle(self) -> None:
        self.visible = not self.visible

    def sync(self, metrics: RuntimeDiagnostics) -> None:
        """Take a snapshot of the latest metrics."""
        self.metrics = replace(metrics)