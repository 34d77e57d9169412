from cltstatics.core.preprocessing.cross_section import CLTCrossSection
from cltstatics.core.preprocessing.layer import Layer, Orientation
from cltstatics.core.preprocessing.layup import CLTLayup
from cltstatics.core.preprocessing.material import CLTMaterial, TimberMaterial


__all__ = [
    'CLTCrossSection',
    'CLTLayup',
    'CLTMaterial',
    'Layer',
    'Orientation',
    'TimberMaterial',
]
