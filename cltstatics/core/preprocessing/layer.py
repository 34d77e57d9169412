import math
from dataclasses import dataclass
from enum import Enum

from cltstatics.core.preprocessing.material import TimberMaterial
from cltstatics.core.utils import ConfigurationError


class Orientation(Enum):
    """Grain direction of a lamella relative to the analysed axis."""

    PARALLEL = 0
    PERPENDICULAR = 90

    @classmethod
    def of(cls, value) -> 'Orientation':
        """Convert ``0``, ``90`` or an :class:`Orientation` to an
        :class:`Orientation`.

        Raises
        ------
        ConfigurationError
            For every other value.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ConfigurationError(
                f'Orientation must be 0 or 90 degrees, got {value!r}.'
            ) from None

    def rotated(self) -> 'Orientation':
        if self is Orientation.PARALLEL:
            return Orientation.PERPENDICULAR
        return Orientation.PARALLEL


@dataclass(frozen=True, eq=False)
class Layer:
    r"""A single lamella of a CLT cross-section.

    Parameters
    ----------
    thickness : :any:`float`
        Lamella thickness in mm.
    orientation : :any:`Orientation`
        Grain direction relative to the analysed axis. ``0`` and ``90`` are
        accepted and converted.
    material : :any:`TimberMaterial`
        Material values of the lamella.

    Raises
    ------
    ConfigurationError
        If :py:attr:`thickness` is not a finite number greater than zero or
        the orientation is neither 0° nor 90°.
    """

    thickness: float
    orientation: Orientation
    material: TimberMaterial

    def __post_init__(self):
        if not (math.isfinite(self.thickness) and self.thickness > 0):
            raise ConfigurationError(
                f'thickness has to be greater than zero, got '
                f'{self.thickness}.'
            )
        object.__setattr__(
            self, 'orientation', Orientation.of(self.orientation)
        )

    @property
    def is_active(self) -> bool:
        """``True`` if the lamella carries stresses in the analysed axis."""
        return self.orientation is Orientation.PARALLEL

    def stiffness_ratio(self, e_ref: float) -> float:
        r"""Modulus of the lamella relative to :math:`E_{ref}`."""
        return self.material.young_mod / e_ref

    def with_thickness(self, thickness: float) -> 'Layer':
        return Layer(thickness, self.orientation, self.material)

    def rotated(self) -> 'Layer':
        return Layer(self.thickness, self.orientation.rotated(),
                     self.material)
