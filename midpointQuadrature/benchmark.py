"""
Sequential midpoint rule benchmark of

    f(x) = cos(x) / (ln(1 + sin(x)) * sin(1 + sin(x)))

on [1e-9, pi - 1e-9] with one million subintervals.
Run with ``python -m midpointQuadrature``.
"""
import numpy as np

from .example_problems import LogSineProblem
from .integrators import MidpointIntegrator
from .report import print_parameters, print_results

# bounds kept away from the singularities at 0 and pi
LOWER_BOUND = 1e-9
UPPER_BOUND = np.pi - 1e-9
N_UNITS = 1_000_000
METHOD_NAME = MidpointIntegrator.name


def main() -> int:
    problem = LogSineProblem(LOWER_BOUND, UPPER_BOUND)
    integ = MidpointIntegrator(N_UNITS)

    print_parameters(problem, integ)
    result = integ(problem, return_time=True)
    print_results(result)

    return 0
