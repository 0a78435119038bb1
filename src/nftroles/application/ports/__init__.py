"""Application ports - interfaces for external adapters."""

from nftroles.application.ports.clock import Clock
from nftroles.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Clock",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
