import numpy as np
from scipy.integrate import quad

from .base_class import Problem


def _substituted_integrand(u: float) -> float:
    return 1.0 / (np.log(u) * np.sin(u))


class LogSineProblem(Problem):
    def __init__(self, low: float = 1e-9, high: float = np.pi - 1e-9):
        """
        Initialize the log-sine problem on [low, high].

        Parameters
        ----------
        low, high : float
            The bounds of integration. The defaults stay 1e-9 away from
            0 and pi, where ln(1 + sin(x)) vanishes.

        Notes
        -----
        With the substitution u = 1 + sin(x) the integral becomes

        .. math::
            \\int_{1 + \\sin a}^{1 + \\sin b} \\frac{du}{\\ln(u) \\sin(u)}

        which only holds when sin(x) > 0 on the whole interval,
        i.e. 0 < low < high < pi. Outside that range `answer` is None.
        """
        super().__init__(low, high)

        if 0.0 < self.low and self.high < np.pi:
            u_low = 1.0 + np.sin(self.low)
            u_high = 1.0 + np.sin(self.high)
            if u_low == u_high:
                self.answer = 0.0
            else:
                self.answer = float(quad(_substituted_integrand,
                                         u_low, u_high, limit=200)[0])

    def integrand(self, x):
        """
        Log-sine integrand function.

        .. math::
            f(x) = \\frac{\\cos(x)}{\\ln(1 + \\sin(x)) \\sin(1 + \\sin(x))}

        No bounds checking is done: where ln(1 + sin(x)) or
        sin(1 + sin(x)) is zero the result is inf or nan.

        Parameters
        ----------
        x : float or numpy.ndarray

        Returns
        -------
        numpy.float64 or numpy.ndarray of the same shape as x
        """
        x = self.handle_input(x)
        with np.errstate(divide='ignore', invalid='ignore'):
            u = 1.0 + np.sin(x)
            return np.cos(x) / (np.log(u) * np.sin(u))

    @property
    def description(self) -> str:
        return 'f(x) = cos(x) / (ln(1+sin(x)) * sin(1+sin(x)))'

    def __str__(self) -> str:
        return f'LogSineProblem(low={self.low}, high={self.high})'


class SineProblem(Problem):
    '''smooth problem, int sin(x) dx = cos(low) - cos(high)'''
    def __init__(self, low: float = 0.0, high: float = np.pi):
        super().__init__(low, high)
        self.answer = float(np.cos(self.low) - np.cos(self.high))

    def integrand(self, x):
        x = self.handle_input(x)
        return np.sin(x)

    @property
    def description(self) -> str:
        return 'f(x) = sin(x)'

    def __str__(self) -> str:
        return f'SineProblem(low={self.low}, high={self.high})'
