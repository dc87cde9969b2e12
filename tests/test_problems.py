import math
import pytest
import numpy as np
import midpointQuadrature as mq


def reference_integrand(x):
    return math.cos(x) / (math.log(1 + math.sin(x)) * math.sin(1 + math.sin(x)))


@pytest.mark.parametrize("x", [1e-9, 0.1, 1.0, np.pi / 2, 2.5, np.pi - 1e-9])
def test_integrand_matches_formula(benchmark_problem, x):
    value = benchmark_problem.integrand(x)
    assert value == pytest.approx(reference_integrand(x), rel=1e-12)


def test_integrand_shapes(benchmark_problem):
    assert np.ndim(benchmark_problem.integrand(1.0)) == 0
    assert benchmark_problem.integrand([0.5, 1.0, 1.5]).shape == (3,)
    X = np.linspace(0.5, 2.5, 10).reshape(2, 5)
    assert benchmark_problem.integrand(X).shape == (2, 5)


def test_integrand_at_zero_is_infinite(benchmark_problem):
    # ln(1 + sin(0)) = 0
    with np.errstate(all='raise'):
        value = benchmark_problem.integrand(0.0)
    assert np.isinf(value)
    assert value > 0


def test_integrand_log_of_zero_propagates(benchmark_problem):
    # sin(3 pi / 2) = -1, log argument is zero
    value = benchmark_problem.integrand(3 * np.pi / 2)
    assert np.isnan(value)


def test_integrand_rejects_strings(benchmark_problem):
    with pytest.raises(TypeError):
        benchmark_problem.integrand("1.0")


@pytest.mark.parametrize("low, high, error", [
    (1.0, 1.0, ValueError),
    (2.0, 1.0, ValueError),
    (0.0, np.inf, ValueError),
    (np.nan, 1.0, ValueError),
    ("0", 1.0, TypeError),
    (True, 2.0, TypeError),
])
def test_invalid_bounds(low, high, error):
    with pytest.raises(error):
        mq.example_problems.LogSineProblem(low, high)


def test_default_bounds():
    problem = mq.example_problems.LogSineProblem()
    assert problem.low == 1e-9
    assert problem.high == np.pi - 1e-9
    assert isinstance(problem.answer, float)


def test_answer_unavailable_across_singularity(singular_problem):
    assert singular_problem.answer is None
    assert mq.example_problems.LogSineProblem(1.0, 4.0).answer is None


def test_answer_by_substitution(smooth_problem):
    xs = np.linspace(0.5, 2.5, 200_001)
    ys = smooth_problem.integrand(xs)
    trapezoid = float(np.sum((ys[1:] + ys[:-1]) / 2 * np.diff(xs)))
    assert smooth_problem.answer == pytest.approx(trapezoid, abs=1e-7)


def test_sine_problem():
    problem = mq.example_problems.SineProblem()
    assert problem.answer == pytest.approx(2.0)
    assert problem.integrand(np.pi / 2) == pytest.approx(1.0)
    assert "SineProblem" in str(problem)
