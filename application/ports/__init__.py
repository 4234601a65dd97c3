"""
Gateway Interfaces (Ports) for the Hevy Insights API.

This package defines abstract interfaces that decouple the analytics
services from infrastructure (HTTP transport to the remote service).
Implementations are provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the services need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import HevyGateway

    class WorkoutSummaryService:
        def __init__(self, gateway: HevyGateway):
            self._gateway = gateway
"""

from application.ports.hevy_gateway import HevyGateway

__all__ = [
    "HevyGateway",
]
