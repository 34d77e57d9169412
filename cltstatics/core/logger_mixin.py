
import logging
from tabulate import tabulate

from typing import Any


class LoggerMixin:
    """
    Mixin giving every cross-section and evaluation class its own logger.

    The logger is named after the module and class of the instance, so all
    instances of one class share it. It is silent by default (``WARNING``
    level and a ``NullHandler``); ``debug=True`` attaches a stream handler
    and lowers the level to ``DEBUG``.

    Subclasses keep writing a plain ``__init__``; the logger is set up
    before it runs.

    Parameters
    ----------
    debug : bool, optional
        Enables debug-level logging output if True. Default is False.

    Attributes
    ----------
    logger : logging.Logger
        The logger of the instance's class.
    """

    _formatter = logging.Formatter(
        fmt=(
            "%(asctime)s [%(levelname)s] %(name)s.%(funcName)s():%(lineno)d "
            "- %(message)s"
        ),
        datefmt="%H:%M:%S",
    )

    def __init__(self, *args: Any, debug: bool = False, **kwargs: Any):
        # ---- Logger setup ----
        self._logger = logging.getLogger(
            f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        self._logger.propagate = False

        # Silent unless a handler is attached
        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Shared by name: every instance resets the class level
        self._logger.setLevel(logging.WARNING)

        if debug:
            # One stream handler per class logger
            if not any(isinstance(h, logging.StreamHandler)
                       for h in self._logger.handlers):
                sh = logging.StreamHandler()
                sh.setFormatter(self._formatter)
                self._logger.addHandler(sh)
            self._logger.setLevel(logging.DEBUG)

        self._logger.debug(
            "Instantiated %s(debug=%s)", self.__class__.__name__, debug
        )
        # ----------------------

    @property
    def logger(self) -> logging.Logger:
        """The logger of this instance's class."""
        if not hasattr(self, "_logger"):
            # instance built without its __init__, e.g. via __new__
            LoggerMixin.__init__(self)
        return self._logger

    # Wraps the subclass __init__ so the logger exists before it runs
    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        orig_init = cls.__dict__.get("__init__")
        if orig_init is None:
            # inherited __init__ is already wrapped
            return

        def wrapped_init(self, *a, **k):
            LoggerMixin.__init__(self, debug=k.get("debug", False))
            return orig_init(self, *a, **k)

        cls.__init__ = wrapped_init


def table_layers(layers, depths, lever_arms, decimals: int = 2):
    """Render the lamellae of a cross-section as a grid table.

    Parameters
    ----------
    layers : sequence of :any:`Layer`
        Lamellae from top to bottom.
    depths : sequence of :any:`float`
        Mid-thickness depth of every lamella from the top fibre.
    lever_arms : sequence of :any:`float`
        Signed distance of every lamella's mid-thickness to the overall
        center of gravity.
    decimals : :any:`int`, default=2
        Number of decimals for float columns.

    Returns
    -------
    :any:`str`
        The table in ``tabulate``'s ``grid`` format.
    """
    header = ["Layer nr.", "t [mm]", "Orientation", "E [N/mm²]",
              "o [mm]", "d [mm]"]
    data = [
        [idx, layer.thickness, f"{layer.orientation.value}°",
         layer.material.young_mod, o, d]
        for idx, (layer, o, d) in enumerate(zip(layers, depths, lever_arms))
    ]
    return tabulate(data, headers=header, tablefmt="grid",
                    floatfmt=f".{decimals}f")


def table_profile(profile, points, decimals: int = 1):
    """Render a static moment profile as a grid table.

    One row per profile point: layer index, depth from the top fibre and
    the static moment at that depth.
    """
    header = ["Layer nr.", "z [mm]", "S [mm³]"]
    data = []
    for idx, (values, depths) in enumerate(zip(profile, points)):
        for n, (z, s) in enumerate(zip(depths, values)):
            data.append([idx if n == 0 else "", z, s])
    return tabulate(data, headers=header, tablefmt="grid",
                    floatfmt=f".{decimals}f")
