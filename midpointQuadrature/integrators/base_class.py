from abc import ABC, abstractmethod
from typing import Any

from ..example_problems import Problem
from ..utils import ResultDict


class Integrator(ABC):
    """
    Abstract base class for one dimensional integrators.
    """

    @abstractmethod
    def __call__(self, problem: Problem, return_N: bool = False,
                 return_time: bool = False, **kwargs: Any) -> ResultDict:
        """
        Integrate problem.integrand over [problem.low, problem.high].

        Parameters
        ----------
        problem : Problem
            The problem to be integrated.
        return_N : bool, optional
            whether to add the number of integrand evaluations
        return_time : bool, optional
            whether to add the time spent integrating

        Returns
        -------
        ResultDict
            - estimate (float) : estimated integral, nan/inf propagated
            - delta_x (float) : width of each subinterval
            - n_evals (int) : only when return_N is True
            - time_ms (float) : only when return_time is True
        """
        pass
