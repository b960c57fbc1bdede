# MIT License (see LICENSE)
"""
Named scalar parameters attached to forces and particles.

Every Force and every Particle owns a ParamSet. Force laws read their
configuration from it and particles carry their opt-in flag in it.
Absence is a normal outcome: lookups return None rather than raising.

Known parameter names are registered in PARAM_TYPES with the kind of value
they hold. Setting a registered name with the wrong kind raises TypeError;
unregistered names are accepted with whatever kind the setter implies.
"""
from __future__ import annotations
from typing import Iterator

from .constants import EXT_ENABLE

Scalar = float | int

PARAM_TYPES: dict[str, type] = {
    # ext_point_mass
    "ext_M": float,
    "ext_x": float,
    "ext_y": float,
    "ext_z": float,
    # solid_sphere
    "rad": float,
    "rho": float,
    "x_cen": float,
    "y_cen": float,
    "z_cen": float,
    # particles
    EXT_ENABLE: int,
}


def register_param(name: str, kind: type) -> None:
    """Register (or re-register) the value kind of a parameter name."""
    if kind not in (float, int):
        raise TypeError(f"Parameters must be float or int, got {kind!r}")
    PARAM_TYPES[name] = kind


class ParamSet:
    """
    A small mapping of parameter name to scalar value.

    Usage:
        params = ParamSet()
        params.set_double("rad", 0.1)
        params.get_double("rad")    # 0.1
        params.get_double("rho")    # None
    """

    def __init__(self, values: dict[str, Scalar] | None = None) -> None:
        self._values: dict[str, Scalar] = {}
        for name, value in (values or {}).items():
            self.set(name, value)

    def _check(self, name: str, kind: type) -> None:
        registered = PARAM_TYPES.get(name)
        if registered is not None and registered is not kind:
            raise TypeError(
                f"Parameter '{name}' is registered as {registered.__name__}, "
                f"cannot set it as {kind.__name__}"
            )

    def set_double(self, name: str, value: float) -> None:
        """Attach a floating point parameter."""
        self._check(name, float)
        self._values[name] = float(value)

    def set_int(self, name: str, value: int) -> None:
        """
        Attach an integer parameter.

        Raises:
            ValueError: If value is a non-integral number such as 1.5.
        """
        self._check(name, int)
        if value != int(value):
            raise ValueError(f"Parameter '{name}' must be an integer, got {value!r}")
        self._values[name] = int(value)

    def set(self, name: str, value: Scalar) -> None:
        """
        Attach a parameter, picking the kind from the registry.

        Unregistered names keep the kind of the value: ints stay ints and
        everything else is stored as float.
        """
        kind = PARAM_TYPES.get(name)
        if kind is None:
            kind = int if isinstance(value, int) and not isinstance(value, bool) else float
        if kind is int:
            self.set_int(name, value)
        else:
            self.set_double(name, value)

    def get_double(self, name: str) -> float | None:
        """Return a floating point parameter, or None if unset."""
        value = self._values.get(name)
        if value is None or not isinstance(value, float):
            return None
        return value

    def get_int(self, name: str) -> int | None:
        """Return an integer parameter, or None if unset."""
        value = self._values.get(name)
        if value is None or not isinstance(value, int):
            return None
        return value

    def remove(self, name: str) -> bool:
        """Detach a parameter. Returns True if it was present."""
        return self._values.pop(name, None) is not None

    def to_dict(self) -> dict[str, Scalar]:
        """Plain dict copy of the attached parameters."""
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParamSet({self._values!r})"
