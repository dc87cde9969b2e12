from . import example_problems, integrators
from .utils import ResultDict
from .timer import Timer
from .convergence import convergence_study

__all__ = [
    "example_problems",
    "integrators",
    "ResultDict",
    "Timer",
    "convergence_study",
]
