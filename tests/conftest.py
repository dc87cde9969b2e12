import pytest
import numpy as np
import midpointQuadrature as mq


@pytest.fixture
def benchmark_problem():
    """log-sine problem on the benchmark interval"""
    return mq.example_problems.LogSineProblem(1e-9, np.pi - 1e-9)


@pytest.fixture
def smooth_problem():
    """log-sine problem away from the singularities at 0 and pi"""
    return mq.example_problems.LogSineProblem(0.5, 2.5)


@pytest.fixture
def singular_problem():
    """log-sine problem starting exactly at the singularity x = 0"""
    return mq.example_problems.LogSineProblem(0.0, np.pi - 1e-9)
