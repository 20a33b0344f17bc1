"""Engine error types surfaced to callers."""

from __future__ import annotations


class EngineError(Exception):
    """Base class for recoverable engine rejections."""


class InvalidPlacement(EngineError, ValueError):
    """Ship placement rejected: out of bounds, overlapping, touching, or out of turn."""


class InvalidAttack(EngineError, ValueError):
    """Attack rejected: out of bounds, repeated, wrong phase, or wrong side."""


class FleetIncomplete(InvalidAttack):
    """Attack attempted while fleets are still being placed."""
