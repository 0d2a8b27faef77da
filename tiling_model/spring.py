"""Damped spring animation of a single scalar value."""

from __future__ import annotations

import math
from time import monotonic
from typing import Optional


class SpringAnimation:
    """Animates a value towards a target following a damped harmonic spring.

    Times are ``time.monotonic()`` timestamps in seconds.
    """

    def __init__(
        self,
        initial_value: float,
        target_value: float,
        initial_velocity: float,
        response: float,
        damping_fraction: float,
        *,
        start_time: Optional[float] = None,
    ) -> None:
        self.initial_value = initial_value
        self.target_value = target_value
        self.initial_velocity = initial_velocity
        self.start_time = monotonic() if start_time is None else start_time
        self.response = response
        self.damping_fraction = damping_fraction
        self.omega_n = 2.0 * math.pi / response
        self.zeta = damping_fraction
        self.omega_d = self.omega_n * math.sqrt(max(1.0 - self.zeta * self.zeta, 0.0))

    def __repr__(self) -> str:
        return (
            f"SpringAnimation({self.initial_value!r} -> {self.target_value!r}, "
            f"velocity={self.initial_velocity!r}, response={self.response!r}, "
            f"damping={self.damping_fraction!r})"
        )

    @classmethod
    def with_defaults(cls, initial_value: float, target_value: float) -> "SpringAnimation":
        """A critically damped spring with a half-second response."""
        return cls(initial_value, target_value, 0.0, 0.5, 1.0)

    def _elapsed(self, time: float) -> float:
        return max(time - self.start_time, 0.0)

    def retarget(self, new_target: float) -> None:
        """Aim at a new target, keeping the current value and velocity."""
        now = monotonic()
        current = self.value_at(now)
        velocity = self.velocity_at(now)
        self.initial_value = current
        self.target_value = new_target
        self.initial_velocity = velocity
        self.start_time = now

    def value_at(self, time: float) -> float:
        t = self._elapsed(time)
        x0 = self.initial_value - self.target_value
        v0 = self.initial_velocity
        if self.zeta >= 1.0:
            decay = math.exp(-self.omega_n * t)
            displacement = decay * (x0 + (v0 + self.omega_n * x0) * t)
        else:
            decay = math.exp(-self.zeta * self.omega_n * t)
            cos_part = x0 * math.cos(self.omega_d * t)
            sin_part = ((v0 + self.zeta * self.omega_n * x0) / self.omega_d) * math.sin(
                self.omega_d * t
            )
            displacement = decay * (cos_part + sin_part)
        return self.target_value + displacement

    def velocity_at(self, time: float) -> float:
        t = self._elapsed(time)
        x0 = self.initial_value - self.target_value
        v0 = self.initial_velocity
        if self.zeta >= 1.0:
            decay = math.exp(-self.omega_n * t)
            a = v0 + self.omega_n * x0
            return decay * (a - self.omega_n * (x0 + a * t))
        decay = math.exp(-self.zeta * self.omega_n * t)
        b = (v0 + self.zeta * self.omega_n * x0) / self.omega_d
        cos_t = math.cos(self.omega_d * t)
        sin_t = math.sin(self.omega_d * t)
        return decay * (
            (-self.zeta * self.omega_n) * (x0 * cos_t + b * sin_t)
            + (-x0 * self.omega_d * sin_t + b * self.omega_d * cos_t)
        )

    def is_complete(self, time: float) -> bool:
        """Whether the spring has settled close enough to its target."""
        if self._elapsed(time) < 0.01:
            return False
        value = self.value_at(time)
        velocity = self.velocity_at(time)
        return abs(value - self.target_value) < 0.5 and abs(velocity) < 0.5

    def target(self) -> float:
        return self.target_value

    def current(self) -> float:
        return self.value_at(monotonic())