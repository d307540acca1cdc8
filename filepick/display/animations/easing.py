# display/animations/easing.py

from typing import Callable, Dict, Sequence

from ...errors import ConfigurationError

class Linear:
    """Constant-speed easing: progress equals elapsed time."""

    def __call__(self, t: float) -> float:
        return t

    def __repr__(self) -> str:
        return "Linear()"

class CubicBezier:
    """
    One-dimensional cubic Bézier easing.

    The default control values give a fast start that settles gently near
    the end, which reads as a wheel slowing down onto its result.
    """
    DEFAULT_POINTS = (0.0, 0.99, 0.999, 1.0)

    def __init__(self, points: Sequence[float] = DEFAULT_POINTS):
        """
        Args:
            points: Exactly four control values p0..p3

        Raises:
            ConfigurationError: If the number of control values is not four
        """
        if len(points) != 4:
            raise ConfigurationError(
                f"cubic Bézier needs exactly 4 control points, got {len(points)}"
            )
        self.points = tuple(float(p) for p in points)

    def __call__(self, t: float) -> float:
        p0, p1, p2, p3 = self.points
        u = 1 - t
        return (u ** 3 * p0
                + 3 * u ** 2 * t * p1
                + 3 * u * t ** 2 * p2
                + t ** 3 * p3)

    def __repr__(self) -> str:
        return f"CubicBezier({self.points})"

EASINGS: Dict[str, Callable[..., Callable[[float], float]]] = {
    "linear": lambda points=None: Linear(),
    "cubic-bezier": lambda points=None: CubicBezier(points) if points is not None else CubicBezier(),
}

def create_easing(name: str, points: Sequence[float] = None) -> Callable[[float], float]:
    """Build an easing curve by name; unknown names are a configuration error."""
    try:
        factory = EASINGS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown easing '{name}' (choose from {', '.join(sorted(EASINGS))})"
        ) from None
    return factory(points)
