import numpy as np
from numbers import Real
from typing import Any, Dict, Union
from collections.abc import MutableMapping


def handle_bound(value, name: str) -> float:
    """
    Check a single integration bound and convert it to float

    Parameter
    ----------
    value : int or float
        the bound to be checked
    name : str
        name of the bound, used in error messages

    Return
    ------
    float
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"{name} must be a real number, got {type(value).__name__}"
        )
    value = float(value)
    if not np.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    return value


class ResultDict(MutableMapping):
    """
    A dictionary-like object designed for integrators \n
    Only accepts float values for the 'estimate' key.
    """

    def __init__(self, estimate: float, **kwargs):
        """
        Parameters
        ----------
        estimate : float
            The estimate of the integral.
        **kwargs : Any
            Other keys and values to be added to the dictionary. \n
            Not compulsory, but can be used to add other keys like: \n
            - n_evals (int): The number of integrand evaluations.
            - delta_x (float): The width of each subinterval.
            - time_ms (float): Time spent accumulating, in milliseconds.

        Example
        -------
        >>> result = ResultDict(estimate=1.0, n_evals=100)
        >>> result['estimate']
        1.0
        >>> # Adding estimate as a string will raise a TypeError
        >>> try:
        >>>    result['estimate'] = '1.0'
        >>> except TypeError as e:
        >>>    print(e)
        'estimate' must be a float, got str
        """
        if not isinstance(estimate, float):
            raise TypeError(
                f"'estimate' must be a float, got {type(estimate).__name__}"
            )
        self._data: Dict[str, Any] = {"estimate": estimate}
        self.update(kwargs)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key in ("estimate", "delta_x", "time_ms"):
            if not isinstance(value, float):
                raise TypeError(
                    f"'{key}' must be a float, got {type(value).__name__}"
                )
        elif key == "n_evals":
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError("'n_evals' must be an int, "
                                f"got {type(value).__name__}")

        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        if key == "estimate":
            raise KeyError("'estimate' key cannot be deleted")
        del self._data[key]

    def __iter__(self):
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return repr(self._data)

    def update(self, other: Union[Dict[str, Any], "ResultDict"]) -> None:
        for key, value in other.items():
            self[key] = value

    def setdefault(self, key: str, default: Any = None) -> Any:
        if key == "estimate" and not isinstance(default, float):
            raise TypeError("'estimate' must be a float, "
                            f"got {type(default).__name__}")
        if key not in self._data:
            self[key] = default
        return self._data[key]
