"""One- and two-dimensional Kalman filters with a scalar measurement."""

from __future__ import annotations

from collections.abc import Sequence


class Kalman1:
    """Scalar Kalman filter with A = H = 1."""

    def __init__(self, init_x: float, init_p: float) -> None:
        self.x = init_x
        self.p = init_p
        self.A = 1.0
        self.H = 1.0
        self.q = 2e2  # process noise covariance
        self.r = 5e2  # measurement noise covariance
        self.gain = 0.0

    def filter(self, z_measure: float) -> float:
        """Fold in one measurement and return the new estimate."""
        self.x = self.A * self.x
        self.p = self.A * self.A * self.p + self.q
        self.gain = self.p * self.H / (self.p * self.H * self.H + self.r)
        self.x = self.x + self.gain * (z_measure - self.H * self.x)
        self.p = (1 - self.gain * self.H) * self.p
        return self.x


class Kalman2:
    """Two-state Kalman filter (value and its rate) with A = [[1, 0.1], [0, 1]], H = [1, 0]."""

    def __init__(self, init_x: Sequence[float], init_p: Sequence[Sequence[float]]) -> None:
        self.x = [float(init_x[0]), float(init_x[1])]
        self.p = [[float(v) for v in init_p[0][:2]], [float(v) for v in init_p[1][:2]]]
        self.A = [[1.0, 0.1], [0.0, 1.0]]
        self.H = [1.0, 0.0]
        self.q = [1e-6, 1e-6]
        self.r = 1e-6
        self.gain = [0.0, 0.0]

    def filter(self, z_measure: float) -> float:
        """Fold in one measurement and return the first state component."""
        A, H, x, p, q = self.A, self.H, self.x, self.p, self.q

        # Predict; each line uses the values updated just above it.
        x[0] = A[0][0] * x[0] + A[0][1] * x[1]
        x[1] = A[1][0] * x[0] + A[1][1] * x[1]
        p[0][0] = A[0][0] * p[0][0] + A[0][1] * p[1][0] + q[0]
        p[0][1] = A[0][0] * p[0][1] + A[1][1] * p[1][1]
        p[1][0] = A[1][0] * p[0][0] + A[0][1] * p[1][0]
        p[1][1] = A[1][0] * p[0][1] + A[1][1] * p[1][1] + q[1]

        # Measure
        temp0 = p[0][0] * H[0] + p[0][1] * H[1]
        temp1 = p[1][0] * H[0] + p[1][1] * H[1]
        temp = self.r + H[0] * temp0 + H[1] * temp1
        self.gain = [temp0 / temp, temp1 / temp]
        innovation = z_measure - (H[0] * x[0] + H[1] * x[1])
        x[0] += self.gain[0] * innovation
        x[1] += self.gain[1] * innovation

        p[0][0] = (1 - self.gain[0] * H[0]) * p[0][0]
        p[0][1] = (1 - self.gain[0] * H[1]) * p[0][1]
        p[1][0] = (1 - self.gain[1] * H[0]) * p[1][0]
        p[1][1] = (1 - self.gain[1] * H[1]) * p[1][1]
        return x[0]