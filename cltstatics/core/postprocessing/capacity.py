
from typing import Literal

import numpy as np

from cltstatics.core.logger_mixin import LoggerMixin
from cltstatics.core.preprocessing.cross_section import CLTCrossSection
from cltstatics.core.utils import KN_TO_N, KNM_TO_NMM


class CLTCapacity(LoggerMixin):
    r"""Characteristic capacities of a CLT cross-section.

    Every capacity follows the weakest link: a candidate value is computed
    for each lamella (and, for bending and shear, for each fibre of that
    lamella) and the smallest candidate governs.

    Capacities refer to the strip width of the cross-section. For the
    default width of 1000 mm the normal and shear capacities are in kN/m and
    the bending capacity in kNm/m.

    Parameters
    ----------
    cross_section : :any:`CLTCrossSection`
        The cross-section to evaluate.
    debug : :any:`bool`, default=False
        Enables debug logging.

    Examples
    --------
    >>> from cltstatics.core.preprocessing import CLTCrossSection, CLTMaterial
    >>> from cltstatics.core.postprocessing import CLTCapacity
    >>> c24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1)
    >>> cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [c24] * 3)
    >>> CLTCapacity(cs).tension
    1160.0
    """

    def __init__(self, cross_section: CLTCrossSection, debug: bool = False):
        self.debug = debug
        self.cross_section = cross_section

    def _axial_candidates(self, attr: str) -> np.ndarray:
        cs = self.cross_section
        candidates = np.full(cs.n_layers, np.inf)
        for i, layer in enumerate(cs.layers):
            if layer.is_active:
                mat = layer.material
                candidates[i] = (getattr(mat, attr) * cs.ae_eff * cs.width
                                 / (mat.young_mod * KN_TO_N))
        return candidates

    def _bending_candidates(self) -> np.ndarray:
        cs = self.cross_section
        w_net = cs.section_moduli
        candidates = np.full(cs.n_layers, np.inf)
        for i, layer in enumerate(cs.layers):
            if layer.is_active:
                mat = layer.material
                values = np.abs(cs.e_ref / mat.young_mod * mat.f_mk * w_net[i])
                candidates[i] = np.min(values) / KNM_TO_NMM
        return candidates

    def _shear_candidates(self) -> np.ndarray:
        cs = self.cross_section
        candidates = np.full(cs.n_layers, np.inf)
        for i, (layer, values) in enumerate(
                zip(cs.layers, cs.static_moment_profile())):
            strength = (layer.material.f_vk if layer.is_active
                        else layer.material.f_rk)
            s = np.abs(np.asarray(values, dtype=float))
            s = s[s > 0]
            if s.size:
                candidates[i] = (strength * cs.mom_of_int * cs.width
                                 / (np.max(s) * KN_TO_N))
        return candidates

    def _candidates(self, mode: str) -> np.ndarray:
        if mode == 'tension':
            return self._axial_candidates('f_t0k')
        if mode == 'compression':
            return self._axial_candidates('f_c0k')
        if mode == 'bending':
            return self._bending_candidates()
        if mode == 'shear':
            return self._shear_candidates()
        raise ValueError(
            f"mode must be 'tension', 'compression', 'bending' or 'shear', "
            f"got {mode!r}."
        )

    def _governing(self, mode: str) -> float:
        candidates = self._candidates(mode)
        self.logger.debug(f"{mode} candidates per lamella: {candidates}")
        return float(np.min(candidates))

    @property
    def tension(self) -> float:
        r"""Characteristic tensile capacity,
        :math:`\min_i f_{t,0,k,i} \sum_j E_j t_j / E_i`."""
        return self._governing('tension')

    @property
    def compression(self) -> float:
        r"""Characteristic compressive capacity,
        :math:`\min_i f_{c,0,k,i} \sum_j E_j t_j / E_i`."""
        return self._governing('compression')

    @property
    def bending(self) -> float:
        r"""Characteristic bending capacity,
        :math:`\min |E_{ref} / E_i \cdot f_{m,k,i} \cdot W_{net}|` over the
        top, mid and bottom fibre of every 0° lamella."""
        return self._governing('bending')

    @property
    def shear(self) -> float:
        r"""Characteristic shear capacity, :math:`\min f_{k} I / S` with the
        shear strength :math:`f_{v,k}` for 0° lamellae and the rolling
        shear strength :math:`f_{r,k}` for 90° lamellae. Points with a zero
        static moment do not govern."""
        return self._governing('shear')

    def capacities(self) -> dict:
        return {
            'tension': self.tension,
            'compression': self.compression,
            'bending': self.bending,
            'shear': self.shear,
        }

    def governing_layer(
        self, mode: Literal['tension', 'compression', 'bending', 'shear']
    ) -> int:
        """Index of the lamella which governs the given capacity."""
        return int(np.argmin(self._candidates(mode)))
