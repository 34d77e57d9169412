from cltstatics.core import (
    CLTCapacity, CLTCrossSection, CLTCrossSectionStress, CLTLayup,
    CLTMaterial, ConfigurationError, Layer, Orientation, StaticMoment,
    TimberMaterial, plot_stress, sub_stack_center_of_gravity
)

__all__ = [
    'CLTCapacity',
    'CLTCrossSection',
    'CLTCrossSectionStress',
    'CLTLayup',
    'CLTMaterial',
    'ConfigurationError',
    'Layer',
    'Orientation',
    'StaticMoment',
    'TimberMaterial',
    'plot_stress',
    'sub_stack_center_of_gravity',
]
