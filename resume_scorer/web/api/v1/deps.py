"""Dependency providers for v1 API."""

from __future__ import annotations

from fastapi import Request

from ....observability import ScoringObserver


def get_observer(request: Request) -> ScoringObserver:
    """Access shared scoring observer from app state."""
    return request.app.state.observer
