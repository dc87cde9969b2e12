from .base_class import Integrator
from .midpoint_integrator import MidpointIntegrator

__all__ = [
    "Integrator",
    "MidpointIntegrator",
]
