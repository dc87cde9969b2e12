from .base_class import Problem
from .benchmark_problems import LogSineProblem, SineProblem

__all__ = [
    "Problem",
    "LogSineProblem",
    "SineProblem",
]
