from abc import ABC, abstractmethod
from typing import Optional, Union
import numpy as np

from ..utils import handle_bound


class Problem(ABC):
    '''
    base class for one dimensional integration problems

    Attributes
    ----------
    low, high : float
        the lower and upper bound of integration domain,
        low < high
    answer : float or None
        the True solution to int integrand(x) dx,
        None when it is not available

    Methods
    -------
    integrand(x)
        the function being integrated
        MUST be implemented by subclasses
        input : float or numpy.ndarray of any shape
        return : numpy.float64 or numpy.ndarray of the same shape
    '''
    def __init__(self, low, high):
        """
        Arguments
        ---------
        low, high : int or float
            the lower and upper bound of integration domain
        """
        self.low = handle_bound(low, 'low')
        self.high = handle_bound(high, 'high')
        if not self.low < self.high:
            raise ValueError(
                'the lower bound must be smaller than the upper bound, '
                f'got low={self.low}, high={self.high}')
        self.answer: Optional[float] = None

    @abstractmethod
    def integrand(self, x) -> Union[np.float64, np.ndarray]:
        """
        must be defined, the function being integrated

        Argument
        --------
        x : float or numpy.ndarray
            point(s) at which the function is evaluated

        Return
        ------
        numpy.float64 or numpy.ndarray
            f(x), elementwise, same shape as x
        """
        pass

    @property
    def description(self) -> str:
        """human readable formula of the integrand"""
        return 'f(x)'

    def __str__(self) -> str:
        return f'Problem(low={self.low}, high={self.high})'

    def handle_input(self, xs) -> Union[np.float64, np.ndarray]:
        """
        Convert xs to numpy float64 without changing its shape

        Parameter
        --------
        xs : float or list or numpy.ndarray
            the input to be handled

        Return
        ------
        numpy.float64 or numpy.ndarray
        """
        if isinstance(xs, (list, tuple)):
            xs = np.array(xs, dtype=np.float64)
        elif isinstance(xs, np.ndarray):
            xs = xs.astype(np.float64, copy=False)
        elif isinstance(xs, (int, float, np.floating, np.integer)) and (
                not isinstance(xs, bool)):
            xs = np.float64(xs)
        else:
            raise TypeError('xs must be a real number, list or numpy.ndarray, '
                            f'got {type(xs).__name__}')
        return xs
