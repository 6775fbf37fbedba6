"""Flight Carbon - carbon emission estimates for flight itineraries."""

from __future__ import annotations

from importlib import import_module
from typing import Any, TYPE_CHECKING

__all__ = [
    "Estimate",
    "EstimatesClient",
    "Failure",
    "Itinerary",
    "Leg",
    "interpret_response",
    "request_estimate",
]

if TYPE_CHECKING:
    from .estimator import request_estimate
    from .interpreter import interpret_response
    from .models import Itinerary, Leg
    from .results import Estimate, Failure
    from .transport import EstimatesClient


def __getattr__(name: str) -> Any:
    """Lazily import modules so the CLI does not pay for httpx up front."""

    module_map = {
        "Estimate": "results",
        "EstimatesClient": "transport",
        "Failure": "results",
        "Itinerary": "models",
        "Leg": "models",
        "interpret_response": "interpreter",
        "request_estimate": "estimator",
    }

    if name not in module_map:
        raise AttributeError(name)

    module = import_module(f".{module_map[name]}", __name__)
    return getattr(module, name)
