import numpy as np

from .base_class import Integrator
from ..example_problems import Problem
from ..timer import Timer
from ..utils import ResultDict


class MidpointIntegrator(Integrator):
    """
    Sequential midpoint rule: split [low, high] into N equal
    subintervals and add up f(midpoint) * delta_x, in index order,
    into a single running total.

    Parameters
    ----------
    N : int
        Number of subintervals (computational units).

    Midpoints are evaluated `chunk_size` at a time, so memory does
    not grow with N.

    Example
    -------
    >>> from midpointQuadrature.integrators import MidpointIntegrator
    >>> from midpointQuadrature.example_problems import SineProblem
    >>> integ = MidpointIntegrator(N=1_000)
    >>> res = integ(SineProblem(), return_N=True, return_time=True)
    >>> print(res['estimate'], res['n_evals'], res['time_ms'])
    """
    name = 'Sequential CPU Midpoint Rule'
    chunk_size = 65_536

    def __init__(self, N: int):
        if isinstance(N, bool) or not isinstance(N, (int, np.integer)):
            raise TypeError(f'N must be an int, got {type(N).__name__}')
        if N <= 0:
            raise ValueError(f'N must be positive, got {N}')
        self.N = int(N)

    def __call__(self, problem: Problem, return_N: bool = False,
                 return_time: bool = False, verbose: bool = False) -> ResultDict:
        """
        Perform the integration process.

        Only the evaluation and accumulation are timed;
        computing delta_x and printing are not.

        Parameters
        ----------
        problem : Problem
            The integration problem
        return_N : bool, optional
            If True, return the number of integrand evaluations.
        return_time : bool, optional
            If True, return the time spent in the accumulation.
        verbose : bool, optional
            If True, print progress messages.

        Return
        -------
        dict
            with the following keys:
            - 'estimate' (float) : estimated integral value,
              nan or inf if the integrand is at any midpoint
            - 'delta_x' (float) : width of each subinterval
            - 'n_evals' (int) : number of function evaluations, if return_N is True
            - 'time_ms' (float) : elapsed milliseconds, if return_time is True
        """
        delta_x = (problem.high - problem.low) / self.N

        if verbose:
            print(f'Evaluating {self.N} midpoints of {str(problem)}, '
                  f'delta_x = {delta_x}')

        total = 0.0
        with Timer() as timer:
            with np.errstate(over='ignore', invalid='ignore'):
                for start in range(0, self.N, self.chunk_size):
                    stop = min(start + self.chunk_size, self.N)
                    xs = problem.low + (np.arange(start, stop) + 0.5) * delta_x
                    contributions = problem.integrand(xs) * delta_x
                    # carry the running total into the first sample;
                    # add.accumulate sums in index order, np.sum is pairwise
                    contributions[0] = total + contributions[0]
                    total = float(np.add.accumulate(contributions)[-1])

        if verbose:
            print(f'Accumulation finished in {timer.elapsed_ms:.3f} ms')

        ret = ResultDict(estimate=total, delta_x=float(delta_x))
        if return_N:
            ret['n_evals'] = self.N
        if return_time:
            ret['time_ms'] = timer.elapsed_ms
        return ret

    def __str__(self) -> str:
        return f'MidpointIntegrator(N={self.N})'
