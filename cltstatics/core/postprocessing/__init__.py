from cltstatics.core.postprocessing.capacity import CLTCapacity
from cltstatics.core.postprocessing.cross_section_stress import (
    CLTCrossSectionStress)
from cltstatics.core.postprocessing.plot import plot_stress
from cltstatics.core.postprocessing.static_moment import (
    StaticMoment, sub_stack_center_of_gravity)


__all__ = [
    'CLTCapacity',
    'CLTCrossSectionStress',
    'plot_stress',
    'StaticMoment',
    'sub_stack_center_of_gravity',
]
