
import numpy as np

from cltstatics.core.logger_mixin import LoggerMixin
from cltstatics.core.preprocessing.cross_section import CLTCrossSection
from cltstatics.core.utils import KN_TO_N, KNM_TO_NMM


class CLTCrossSectionStress(LoggerMixin):
    """
    Calculate lamella stresses of a CLT cross-section.

    Internal forces refer to the strip width of the cross-section (1 m by
    default), i.e. normal and shear forces are given in kN and bending
    moments in kNm per strip. All stresses are returned in N/mm².

    The calculator holds no state besides the cross-section: every method
    can be called repeatedly with different internal forces.

    Parameters
    ----------
    cross_section : CLTCrossSection
        The cross-section to evaluate.
    debug : bool, default=False
        Enables debug logging.

    Examples
    --------
    >>> from cltstatics.core.preprocessing import CLTCrossSection, CLTMaterial
    >>> from cltstatics.core.postprocessing import CLTCrossSectionStress
    >>> c24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1)
    >>> cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [c24] * 3)
    >>> stress = CLTCrossSectionStress(cs)
    >>> tension, compression = stress.normal_stress(n=100)
    >>> tension
    array([1.25, 0.  , 1.25])
    >>> stress.bending_stress(m_yy=10)[0]
    array([-4.32692308, -2.88461538, -1.44230769])
    """

    def __init__(self, cross_section: CLTCrossSection, debug: bool = False):
        self.debug = debug
        self.cross_section = cross_section

    def _signed_normal_stress(self, n: float) -> np.ndarray:
        cs = self.cross_section
        e = np.array([layer.material.young_mod for layer in cs.layers])
        sigma = n * KN_TO_N * e / (cs.width * cs.ae_eff)
        return np.where(cs.active, sigma, 0.0)

    def normal_stress(self, n: float = 0):
        r"""
        Distribute a normal force on the lamellae by their stiffness.

        Parameters
        ----------
        n : float, optional
            Normal force in kN, positive for tension (default: 0).

        Returns
        -------
        tuple of numpy.ndarray
            ``(tension, compression)``, one value per lamella. A positive
            normal force fills ``tension`` and leaves ``compression`` at
            zero, a negative one the other way round. Lamellae at 90° are
            zero in both.

        Notes
        -----
        For a strip of width :math:`b`:

        .. math::
            \sigma_i = \frac{N E_i}{b \sum_j E_j t_j}
        """
        sigma = self._signed_normal_stress(n)
        zeros = np.zeros_like(sigma)
        self.logger.debug(f"N={n} kN -> sigma={sigma}")
        if n > 0:
            return sigma, zeros
        return zeros, sigma

    def bending_stress(self, m_yy: float = 0) -> np.ndarray:
        r"""
        Bending stresses at the top, mid and bottom fibre of every lamella.

        Parameters
        ----------
        m_yy : float, optional
            Bending moment in kNm (default: 0).

        Returns
        -------
        numpy.ndarray
            Array of shape ``(n_layers, 3)``. Rows of lamellae at 90° are
            zero.

        Notes
        -----
        .. math::
            \sigma_{i} = \frac{E_i}{E_{ref}} \frac{M}{I} z

        with :math:`z` the signed distance of the fibre to the center of
        gravity (positive below it). In magnitude this equals
        :math:`E_i / E_{ref} \cdot M / W_{net}` with
        :math:`W_{net} = I / |z|`; fibres above the center of gravity are in
        compression under a positive moment.
        """
        cs = self.cross_section
        ratios = np.array(
            [layer.stiffness_ratio(cs.e_ref) for layer in cs.layers]
        )
        sigma = (ratios[:, None] * m_yy * KNM_TO_NMM / cs.mom_of_int
                 * cs.lamella_fibres)
        sigma[~cs.active] = 0.0
        return sigma

    def shear_stress(self, v_z: float = 0) -> list:
        r"""
        Shear stresses at every point of the static moment profile.

        Parameters
        ----------
        v_z : float, optional
            Shear force in kN (default: 0).

        Returns
        -------
        list of list of float
            Same layout as :any:`StaticMoment.profile`; values in lamellae
            at 90° are rolling shear stresses.

        Notes
        -----
        .. math::
            \tau = \frac{V S}{I b}
        """
        cs = self.cross_section
        factor = v_z * KN_TO_N / (cs.mom_of_int * cs.width)
        return [[factor * s for s in values]
                for values in cs.static_moment_profile()]

    def combined_stress(self, n: float = 0, m_yy: float = 0) -> np.ndarray:
        """
        Normal plus bending stress at the top, mid and bottom fibre of every
        lamella, shape ``(n_layers, 3)``.
        """
        sigma_n = self._signed_normal_stress(n)
        return self.bending_stress(m_yy) + sigma_n[:, None]

    def _fibre_depths(self) -> np.ndarray:
        cs = self.cross_section
        return cs.lamella_fibres + cs.center_of_gravity

    def normal_stress_disc(self, n: float = 0):
        """
        Normal stress distribution over the thickness for plotting.

        Returns
        -------
        list of [numpy.ndarray, numpy.ndarray]
            Depths below the top fibre and the signed stresses at these
            depths, two points (top, bottom) per lamella.
        """
        depths = self._fibre_depths()[:, [0, 2]].ravel()
        sigma = np.repeat(self._signed_normal_stress(n), 2)
        return [depths, sigma]

    def bending_stress_disc(self, m_yy: float = 0):
        """Bending stress distribution over the thickness for plotting,
        three points (top, mid, bottom) per lamella."""
        return [self._fibre_depths().ravel(),
                self.bending_stress(m_yy).ravel()]

    def shear_stress_disc(self, v_z: float = 0):
        """Shear stress distribution over the thickness for plotting, one
        point per static moment value."""
        points = self.cross_section.static_moment.points
        depths = np.array([z for values in points for z in values])
        tau = np.array([t for values in self.shear_stress(v_z)
                        for t in values])
        return [depths, tau]
