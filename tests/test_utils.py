import pytest
import numpy as np
from midpointQuadrature import ResultDict
from midpointQuadrature.utils import handle_bound


def test_result_dict_keys():
    res = ResultDict(estimate=1.0, n_evals=10, delta_x=0.1, time_ms=2.5)
    assert res['estimate'] == 1.0
    assert len(res) == 4
    assert set(res) == {'estimate', 'n_evals', 'delta_x', 'time_ms'}


@pytest.mark.parametrize("key, value", [
    ('estimate', '1.0'),
    ('estimate', 1),
    ('delta_x', 1),
    ('time_ms', None),
    ('n_evals', 1.0),
    ('n_evals', True),
])
def test_result_dict_types(key, value):
    res = ResultDict(estimate=1.0)
    with pytest.raises(TypeError):
        res[key] = value


def test_result_dict_keeps_estimate():
    res = ResultDict(estimate=np.nan, n_evals=1)
    del res['n_evals']
    with pytest.raises(KeyError):
        del res['estimate']
    assert np.isnan(res['estimate'])


def test_result_dict_setdefault():
    res = ResultDict(estimate=1.0)
    assert res.setdefault('n_evals', 5) == 5
    with pytest.raises(TypeError):
        res.setdefault('estimate', '2.0')


@pytest.mark.parametrize("key, value", [
    ('time_ms', 'not a float'),
    ('delta_x', 1),
    ('n_evals', True),
    ('n_evals', 1.0),
])
def test_result_dict_setdefault_types(key, value):
    res = ResultDict(estimate=1.0)
    with pytest.raises(TypeError):
        res.setdefault(key, value)
    assert key not in res


def test_result_dict_setdefault_keeps_existing():
    res = ResultDict(estimate=1.0, time_ms=2.0)
    assert res.setdefault('time_ms', 3.0) == 2.0
    assert res.setdefault('estimate', 4.0) == 1.0


@pytest.mark.parametrize("value, expected", [
    (1, 1.0),
    (1e-9, 1e-9),
    (np.float64(2.5), 2.5),
])
def test_handle_bound(value, expected):
    assert handle_bound(value, 'low') == expected
    assert isinstance(handle_bound(value, 'low'), float)
