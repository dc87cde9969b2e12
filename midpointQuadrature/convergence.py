import warnings
import numpy as np
from typing import Iterable, List

from .example_problems import Problem
from .integrators import MidpointIntegrator


def convergence_study(problem: Problem, Ns: Iterable[int],
                      verbose: bool = False) -> List[float]:
    """
    Measure how much the midpoint estimate moves when delta_x is halved.

    Parameters
    ----------
    problem : Problem
        The problem to be integrated.
    Ns : Iterable[int]
        Numbers of subintervals, each is compared against 2 * N.
    verbose : bool, optional
        If True, print the estimates for every N.
        Default is False.

    Returns
    -------
    List[float]
        |I(2N) - I(N)| for each N in Ns, in the same order
    """
    differences = []
    for N in Ns:
        coarse = MidpointIntegrator(N)(problem)['estimate']
        fine = MidpointIntegrator(2 * N)(problem)['estimate']

        if not (np.isfinite(coarse) and np.isfinite(fine)):
            warnings.warn(
                f'non-finite estimate for N={N} on {str(problem)}, '
                'check the interval for singularities', RuntimeWarning)

        difference = abs(fine - coarse)
        differences.append(difference)

        if verbose:
            print(f'N = {N}: I(N) = {coarse}, I(2N) = {fine}, '
                  f'difference = {difference}')

    return differences
