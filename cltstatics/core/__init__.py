from cltstatics.core import postprocessing, preprocessing
from cltstatics.core.postprocessing import *  # noqa: F401, F403
from cltstatics.core.preprocessing import *  # noqa: F401, F403
from cltstatics.core.utils import ConfigurationError

__all__ = [
    'ConfigurationError',
    'postprocessing',
    'preprocessing',
]
