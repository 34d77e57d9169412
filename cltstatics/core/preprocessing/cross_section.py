
from functools import cached_property
from typing import Sequence, Union

import numpy as np

from cltstatics.core.logger_mixin import LoggerMixin, table_layers
from cltstatics.core.preprocessing.layer import Layer, Orientation
from cltstatics.core.preprocessing.material import TimberMaterial
from cltstatics.core.utils import ConfigurationError, rectangular_torsion


class CLTCrossSection(LoggerMixin):
    r"""Cross-section of a cross-laminated timber panel in one direction.

    The cross-section is an ordered stack of lamellae from the top fibre
    to the bottom fibre. Lamellae parallel to the analysed axis (0°) carry
    normal and bending stresses, perpendicular lamellae (90°) only act as
    spacers which transmit shear (rolling shear). All stiffness values are
    weighted by the modulus of the top lamella :math:`E_{ref}` and refer to
    a strip of width :py:attr:`width`.

    All properties are computed on construction; the instance is not
    modified afterwards.

    Parameters
    ----------
    thicknesses : sequence of :any:`float`
        Lamella thicknesses in mm, top to bottom.
    orientations : sequence of :any:`int` or :any:`Orientation`
        Lamella orientations, ``0`` (parallel) or ``90`` (perpendicular).
    materials : sequence of :any:`TimberMaterial`
        Lamella materials.
    width : :any:`float`, default=1000.0
        Reference strip width in mm.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Raises
    ------
    ConfigurationError
        If the three sequences differ in length or are empty, a thickness,
        a modulus or the width is not a finite number greater than zero, an
        orientation is neither 0 nor 90 or no lamella is parallel to the
        analysed axis.

    Examples
    --------
    >>> from cltstatics.core.preprocessing import CLTMaterial
    >>> c24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1)
    >>> cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [c24] * 3)
    >>> cs.center_of_gravity
    60.0
    >>> cs.area
    80000.0
    """

    # noinspection PyMissingConstructor
    def __init__(
        self,
        thicknesses: Sequence[float],
        orientations: Sequence[Union[int, Orientation]],
        materials: Sequence[TimberMaterial],
        width: float = 1000.0,
        debug: bool = False
    ):
        self.debug = debug
        lengths = (len(thicknesses), len(orientations), len(materials))
        if len(set(lengths)) != 1:
            self.logger.error(f"Input lengths do not match: {lengths}.")
            raise ConfigurationError(
                f'thicknesses, orientations and materials must have the same '
                f'length, got {lengths}.'
            )
        layers = [
            Layer(t, o, m)
            for t, o, m in zip(thicknesses, orientations, materials)
        ]
        self._setup(layers, width)

    @classmethod
    def from_layers(
        cls, layers: Sequence[Layer], width: float = 1000.0,
        debug: bool = False
    ) -> 'CLTCrossSection':
        """Create a cross-section from already built :any:`Layer` objects."""
        return cls(
            [layer.thickness for layer in layers],
            [layer.orientation for layer in layers],
            [layer.material for layer in layers],
            width=width,
            debug=debug,
        )

    def _setup(self, layers, width):
        if not layers:
            self.logger.error("Empty layer stack.")
            raise ConfigurationError('At least one lamella is required.')
        if not (np.isfinite(width) and width > 0):
            self.logger.error(f"Invalid width {width}.")
            raise ConfigurationError('width has to be greater than zero.')
        for idx, layer in enumerate(layers):
            young_mod = layer.material.young_mod
            if not (np.isfinite(young_mod) and young_mod > 0):
                self.logger.error(
                    f"Invalid modulus {young_mod} in lamella {idx}."
                )
                raise ConfigurationError(
                    f'young_mod of lamella {idx} has to be a finite number '
                    f'greater than zero, got {young_mod}.'
                )
        if not any(layer.is_active for layer in layers):
            self.logger.error("No lamella parallel to the analysed axis.")
            raise ConfigurationError(
                'At least one lamella must be oriented at 0°, otherwise the '
                'center of gravity is undefined.'
            )
        self.layers = tuple(layers)
        self.width = float(width)

        t = np.array([layer.thickness for layer in self.layers], dtype=float)
        self._thicknesses = t
        self._active = np.array([layer.is_active for layer in self.layers])
        self._e = np.array(
            [layer.material.young_mod for layer in self.layers], dtype=float
        )

        self._e_ref = self._e[0]
        self._ratios = self._e / self._e_ref
        self._depths = np.cumsum(t) - t / 2
        self._center_of_gravity = self._calc_center_of_gravity()
        self._lever_arms = self._depths - self._center_of_gravity
        self._z_top = abs(self._lever_arms[0]) + t[0] / 2
        self._z_bottom = abs(self._lever_arms[-1]) + t[-1] / 2

        w = np.where(self._active, self._ratios * self.width, 0.0)
        self._area = float(np.sum(w * t))
        self._mom_of_int = float(
            np.sum(w * t ** 3 / 12) + np.sum(w * t * self._lever_arms ** 2)
        )
        self._ae_eff = float(np.sum(np.where(self._active, self._e * t, 0.0)))
        self._torsion = rectangular_torsion(self.width, self.thickness)

        self.logger.debug(
            f"CoG={self._center_of_gravity}, A={self._area}, "
            f"I={self._mom_of_int}, AEeff={self._ae_eff}"
        )
        self.logger.info(
            f"CLTCrossSection with {self.n_layers} lamellae initialized."
        )

    def _calc_center_of_gravity(self) -> float:
        weights = np.where(
            self._active, self._ratios * self._thicknesses, 0.0
        )
        denominator = np.sum(weights)
        if not (np.isfinite(denominator) and denominator > 0):
            self.logger.error("Center of gravity denominator is zero.")
            raise ConfigurationError(
                'The stiffness weighted area of the 0° lamellae is zero.'
            )
        return float(np.sum(weights * self._depths) / denominator)

    @property
    def n_layers(self) -> int:
        return len(self.layers)

    @property
    def e_ref(self) -> float:
        """Modulus of the top lamella, used to normalize all stiffness
        ratios."""
        return float(self._e_ref)

    @property
    def thickness(self) -> float:
        """Overall thickness of the cross-section in mm."""
        return float(np.sum(self._thicknesses))

    @property
    def thicknesses(self) -> np.ndarray:
        return self._thicknesses.copy()

    @property
    def active(self) -> np.ndarray:
        """Boolean mask of the lamellae parallel to the analysed axis."""
        return self._active.copy()

    @property
    def layer_depths(self) -> np.ndarray:
        """Depth of every lamella's mid-thickness below the top fibre."""
        return self._depths.copy()

    @property
    def center_of_gravity(self) -> float:
        r"""Stiffness weighted center of gravity, distance from the top
        fibre in mm.

        .. math::
            z_s = \frac{\sum_i \frac{E_i}{E_{ref}} t_i o_i}
                       {\sum_i \frac{E_i}{E_{ref}} t_i}

        Only lamellae at 0° are included in both sums.
        """
        return self._center_of_gravity

    @property
    def lever_arms(self) -> np.ndarray:
        """Signed distance of every lamella's mid-thickness to the center of
        gravity (positive below it)."""
        return self._lever_arms.copy()

    @property
    def z_top(self) -> float:
        """Distance of the top fibre to the center of gravity."""
        return float(self._z_top)

    @property
    def z_bottom(self) -> float:
        """Distance of the bottom fibre to the center of gravity."""
        return float(self._z_bottom)

    @property
    def area(self) -> float:
        r"""Active net area in mm², :math:`\sum \frac{E_i}{E_{ref}} b t_i`
        over the 0° lamellae."""
        return self._area

    @property
    def mom_of_int(self) -> float:
        r"""Stiffness weighted moment of inertia about the center of gravity
        in mm⁴.

        .. math::
            I = \sum_i \frac{E_i}{E_{ref}} b \left(\frac{t_i^3}{12}
                + t_i d_i^2\right)
        """
        return self._mom_of_int

    @property
    def ae_eff(self) -> float:
        r""":math:`\sum E_i t_i` over the 0° lamellae, in N/mm."""
        return self._ae_eff

    @property
    def radius_of_gyration(self) -> float:
        return float(np.sqrt(self._mom_of_int / self._area))

    @property
    def torsional_inertia(self) -> float:
        """Torsional moment of inertia of the gross panel strip in mm⁴."""
        return float(self._torsion[0])

    @property
    def torsional_modulus(self) -> float:
        """Torsional section modulus of the gross panel strip in mm³."""
        return float(self._torsion[1])

    @property
    def lamella_fibres(self) -> np.ndarray:
        """Signed distances of the top, mid and bottom fibre of every
        lamella to the center of gravity, shape ``(n_layers, 3)``."""
        half = self._thicknesses / 2
        return np.column_stack((
            self._lever_arms - half, self._lever_arms, self._lever_arms + half
        ))

    @property
    def section_moduli(self) -> np.ndarray:
        r"""Net section moduli :math:`W = I / |z|` at the top, mid and bottom
        fibre of every lamella, shape ``(n_layers, 3)``.

        Fibres lying on the center of gravity get ``inf``; lamellae at 90°
        get zeros.
        """
        z = np.abs(self.lamella_fibres)
        w = np.full_like(z, np.inf)
        np.divide(self._mom_of_int, z, out=w, where=z > 0)
        w[~self._active] = 0.0
        return w

    def effective_properties(self) -> dict:
        """Return the effective cross-section properties as a dictionary."""
        return {
            'center_of_gravity': self.center_of_gravity,
            'z_top': self.z_top,
            'z_bottom': self.z_bottom,
            'area': self.area,
            'mom_of_int': self.mom_of_int,
            'ae_eff': self.ae_eff,
            'torsional_inertia': self.torsional_inertia,
            'torsional_modulus': self.torsional_modulus,
        }

    def sub_stack(self, index: int, fraction: float = 1.0):
        """Create the partial cross-section above a depth inside lamella
        ``index``.

        The partial cross-section consists of all lamellae above ``index``
        and the upper ``fraction`` of lamella ``index``, with unchanged
        orientations, materials and width.

        Raises
        ------
        IndexError
            If ``index`` is not a valid lamella index.
        ValueError
            If ``fraction`` is not in (0, 1].
        """
        if not 0 <= index < self.n_layers:
            raise IndexError(f'Lamella index {index} out of range.')
        if not 0 < fraction <= 1:
            raise ValueError('fraction must be in the range (0, 1].')
        layers = list(self.layers[:index])
        current = self.layers[index]
        layers.append(current.with_thickness(current.thickness * fraction))
        return CLTCrossSection.from_layers(
            layers, width=self.width, debug=self.debug
        )

    @cached_property
    def static_moment(self):
        """The :any:`StaticMoment` of this cross-section (computed on first
        access)."""
        from cltstatics.core.postprocessing.static_moment import StaticMoment
        return StaticMoment(self, debug=self.debug)

    def static_moment_profile(self) -> list:
        """Static moments per lamella, see :any:`StaticMoment.profile`."""
        return self.static_moment.profile

    def table(self, decimals: int = 2) -> str:
        return table_layers(
            self.layers, self._depths, self._lever_arms, decimals=decimals
        )
