from .example_problems import Problem
from .integrators import MidpointIntegrator
from .utils import ResultDict

SEPARATOR = '-' * 56
FIXED_DIGITS = 15


def format_fixed(value: float) -> str:
    """fixed point notation with exactly 15 digits after the decimal point"""
    return f'{value:.{FIXED_DIGITS}f}'


def print_parameters(problem: Problem, integrator: MidpointIntegrator) -> None:
    """
    Print the integrand, method, interval, N and delta_x,
    numbers in default formatting.
    """
    delta_x = (problem.high - problem.low) / integrator.N
    print(f'Integrating {problem.description}')
    print(f'Method: {integrator.name}')
    print(f'Interval: [{problem.low}, {problem.high}]')
    print(f'Total computational units (N): {integrator.N}')
    print(f'Delta x: {delta_x}')


def print_results(result: ResultDict) -> None:
    """
    Print the estimate and the elapsed time between separators.

    Parameters
    ----------
    result : ResultDict
        must contain 'estimate' and 'time_ms'
    """
    print(SEPARATOR)
    print(f'Integral result (CPU): {format_fixed(result["estimate"])}')
    print(f'Execution time (CPU): {format_fixed(result["time_ms"])} ms')
    print(SEPARATOR)
