
from typing import Literal

import matplotlib.pyplot as plt

from cltstatics.core.postprocessing.cross_section_stress import (
    CLTCrossSectionStress
)


def plot_stress(
    stress: CLTCrossSectionStress,
    kind: Literal['normal', 'bending', 'shear'],
    n: float = 0,
    m_yy: float = 0,
    v_z: float = 0,
    ax=None,
):
    """Draw a stress distribution over the thickness of a cross-section.

    Lamellae at 90° are shaded. The depth axis points downwards so the top
    fibre of the panel is at the top of the plot.

    Parameters
    ----------
    stress : :any:`CLTCrossSectionStress`
        Stress calculator of the cross-section.
    kind : ``'normal'``, ``'bending'`` or ``'shear'``
        Which distribution to draw.
    n, m_yy, v_z : :any:`float`
        Normal force (kN), bending moment (kNm) and shear force (kN). Only
        the one matching ``kind`` is used.
    ax : :any:`matplotlib.axes.Axes`, optional
        Axis to draw on. A new figure is created if omitted.

    Returns
    -------
    :any:`matplotlib.figure.Figure`
    """
    if kind == 'normal':
        depths, values = stress.normal_stress_disc(n)
        label = r'$\sigma_N$ [N/mm²]'
    elif kind == 'bending':
        depths, values = stress.bending_stress_disc(m_yy)
        label = r'$\sigma_M$ [N/mm²]'
    elif kind == 'shear':
        depths, values = stress.shear_stress_disc(v_z)
        label = r'$\tau$ [N/mm²]'
    else:
        raise ValueError(
            f"kind must be 'normal', 'bending' or 'shear', got {kind!r}."
        )

    if ax is None:
        fig, ax = plt.subplots()
    else:
        fig = ax.figure

    cs = stress.cross_section
    top = 0.0
    for layer in cs.layers:
        if not layer.is_active:
            ax.axhspan(top, top + layer.thickness, color='0.9', zorder=0)
        top += layer.thickness

    ax.plot(values, depths, color='tab:blue', marker='.')
    ax.fill_betweenx(depths, 0, values, color='tab:blue', alpha=0.2)
    ax.axvline(0, color='black', linewidth=0.8)
    ax.axhline(cs.center_of_gravity, color='tab:red', linestyle='--',
               linewidth=0.8)
    ax.set_ylim(cs.thickness, 0)
    ax.set_xlabel(label)
    ax.set_ylabel('z [mm]')
    return fig
