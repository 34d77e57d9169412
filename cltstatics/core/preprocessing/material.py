
import math
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable

from cltstatics.core.utils import ConfigurationError


@runtime_checkable
class TimberMaterial(Protocol):
    """Read-only view of the material values a lamella needs.

    Any object exposing these attributes can be used as the material of a
    lamella, whether it describes solid timber, glued-laminated timber or a
    panel product.
    """

    young_mod: float
    f_t0k: float
    f_c0k: float
    f_mk: float
    f_vk: float
    f_rk: float


@dataclass(frozen=True, eq=False)
class CLTMaterial:
    r"""Create a material for the lamellae of a CLT cross-section.

    Parameters
    ----------
    young_mod : :any:`float`
        Mean modulus of elasticity parallel to the grain
        (:math:`E_{0,mean}`) in N/mm².
    f_t0k : :any:`float`
        Characteristic tensile strength parallel to the grain in N/mm².
    f_c0k : :any:`float`
        Characteristic compressive strength parallel to the grain in N/mm².
    f_mk : :any:`float`
        Characteristic bending strength in N/mm².
    f_vk : :any:`float`
        Characteristic shear strength in N/mm².
    f_rk : :any:`float`
        Characteristic rolling shear strength in N/mm².
    name : :any:`str`, optional
        Grade label, only used for display.

    Raises
    ------
    ConfigurationError
        If any of the numeric values is not a finite number greater than
        zero.

    Examples
    --------
    >>> from cltstatics.core.preprocessing import CLTMaterial
    >>> c24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1, name='C24')
    """

    young_mod: float
    f_t0k: float
    f_c0k: float
    f_mk: float
    f_vk: float
    f_rk: float
    name: Optional[str] = None

    def __post_init__(self):
        for attr in ('young_mod', 'f_t0k', 'f_c0k', 'f_mk', 'f_vk', 'f_rk'):
            value = getattr(self, attr)
            if not (math.isfinite(value) and value > 0):
                raise ConfigurationError(
                    f'{attr} has to be a finite number greater than zero, '
                    f'got {value}.'
                )

    def __str__(self):
        return self.name or f'CLTMaterial(E={self.young_mod})'
