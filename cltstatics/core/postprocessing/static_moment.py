
import math

import numpy as np

from cltstatics.core.logger_mixin import LoggerMixin, table_profile


def sub_stack_center_of_gravity(cross_section, index: int, fraction: float):
    """Center of gravity and active area of a partial cross-section.

    The partial cross-section holds all lamellae above lamella ``index``
    plus the upper ``fraction`` of lamella ``index``. It only lives for the
    duration of this call.

    Parameters
    ----------
    cross_section : :any:`CLTCrossSection`
        The full cross-section.
    index : :any:`int`
        Lamella in which the cut lies.
    fraction : :any:`float`
        Share of lamella ``index`` above the cut, in (0, 1].

    Returns
    -------
    :any:`tuple`
        ``(center_of_gravity, area)`` of the partial cross-section.
    """
    partial = cross_section.sub_stack(index, fraction)
    return partial.center_of_gravity, partial.area


class StaticMoment(LoggerMixin):
    r"""Static moments (first moments of area) through a CLT cross-section.

    For every lamella a short list of static moments is computed, from the
    top of the lamella downwards:

    * 0° lamellae: top, mid and bottom of the lamella. If the center of
      gravity lies inside the lamella (and not at its mid-depth), a fourth
      value at the center of gravity is inserted in depth order.
    * 90° lamellae: a single value, equal to the bottom value of the
      lamella above. These lamellae transmit the static moment without
      adding to it.

    The top value of every lamella equals the bottom value of the lamella
    above, and the very first value is zero.

    Each static moment below the top of a 0° lamella is derived from the
    partial cross-section above the considered depth:

    .. math::
        S = (z_s - z_{s,part}) \cdot A_{part}

    where :math:`z_s` is the center of gravity of the full cross-section and
    :math:`z_{s,part}`, :math:`A_{part}` are the center of gravity and the
    active area of the partial cross-section. Partial cross-sections are
    only asked for their own center of gravity and area, never for their
    static moments, so the recursion ends after one level.

    Parameters
    ----------
    cross_section : :any:`CLTCrossSection`
        The cross-section to evaluate.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Examples
    --------
    >>> from cltstatics.core.preprocessing import CLTCrossSection, CLTMaterial
    >>> from cltstatics.core.postprocessing import StaticMoment
    >>> c24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1)
    >>> cs = CLTCrossSection([100], [0], [c24])
    >>> StaticMoment(cs).profile
    [[0.0, 1250000.0, 0.0]]
    """

    def __init__(self, cross_section, debug: bool = False):
        self.debug = debug
        self.cross_section = cross_section
        self.n_sub_stacks = 0
        self._profile, self._points = self._compute()
        if self.debug:
            self.logger.debug("\n" + self.table())

    def _compute(self):
        cs = self.cross_section
        cog = cs.center_of_gravity
        previous = 0.0
        top = 0.0
        profile, points = [], []

        for i, layer in enumerate(cs.layers):
            t = layer.thickness
            if not layer.is_active:
                self.logger.debug(
                    f"Lamella {i} at 90°: continuity value {previous}."
                )
                profile.append([previous])
                points.append([top])
                top += t
                continue

            fractions = [0.5, 1.0]
            if top < cog < top + t and not math.isclose(cog, top + t / 2):
                fractions.append((cog - top) / t)
                self.logger.debug(
                    f"Center of gravity lies inside lamella {i}."
                )

            values, depths = [previous], [top]
            for fraction in sorted(fractions):
                sub_cog, sub_area = sub_stack_center_of_gravity(
                    cs, i, fraction
                )
                self.n_sub_stacks += 1
                values.append((cog - sub_cog) * sub_area)
                depths.append(top + fraction * t)

            profile.append(values)
            points.append(depths)
            previous = values[-1]
            top += t

        return profile, points

    @property
    def profile(self) -> list:
        """Static moments in mm³ per lamella, top to bottom."""
        return [list(values) for values in self._profile]

    @property
    def points(self) -> list:
        """Depth below the top fibre of every value in :py:attr:`profile`."""
        return [list(depths) for depths in self._points]

    def flat(self) -> np.ndarray:
        return np.array([s for values in self._profile for s in values])

    @property
    def maximum(self) -> float:
        return float(np.max(np.abs(self.flat())))

    def table(self, decimals: int = 1) -> str:
        return table_profile(self._profile, self._points, decimals=decimals)
