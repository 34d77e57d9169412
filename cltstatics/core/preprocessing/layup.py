
from typing import Literal, Sequence, Union

from cltstatics.core.preprocessing.cross_section import CLTCrossSection
from cltstatics.core.preprocessing.layer import Orientation
from cltstatics.core.preprocessing.material import TimberMaterial


class CLTLayup:
    r"""Physical build-up of a CLT panel and its two principal
    cross-sections.

    The layup describes the boards as they are assembled. Its mechanical
    properties are given by two independent cross-sections: ``cs_x`` in the
    main direction (orientations as given) and ``cs_y`` perpendicular to it
    (every orientation rotated by 90°).

    Parameters
    ----------
    thicknesses : sequence of :any:`float`
        Lamella thicknesses in mm, top to bottom.
    orientations : sequence of :any:`int` or :any:`Orientation`
        Lamella orientations relative to the main direction.
    materials : sequence of :any:`TimberMaterial`
        Lamella materials.
    width : :any:`float`, default=1000.0
        Reference strip width in mm, used for both directions.
    debug : :any:`bool`, default=False
        Enables debug logging of both cross-sections.

    Raises
    ------
    ConfigurationError
        If either direction cannot form a cross-section, e.g. when all
        lamellae share the same orientation.

    Examples
    --------
    >>> from cltstatics.core.preprocessing import CLTLayup, CLTMaterial
    >>> c24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1)
    >>> layup = CLTLayup([40, 20, 40], [0, 90, 0], [c24] * 3)
    >>> layup.cs_x.center_of_gravity, layup.cs_y.center_of_gravity
    (50.0, 50.0)
    """

    def __init__(
        self,
        thicknesses: Sequence[float],
        orientations: Sequence[Union[int, Orientation]],
        materials: Sequence[TimberMaterial],
        width: float = 1000.0,
        debug: bool = False
    ):
        self.cs_x = CLTCrossSection(
            thicknesses, orientations, materials, width=width, debug=debug
        )
        self.cs_y = CLTCrossSection.from_layers(
            [layer.rotated() for layer in self.cs_x.layers],
            width=width, debug=debug
        )

    @property
    def thickness(self) -> float:
        return self.cs_x.thickness

    def cross_section(self, direction: Literal['x', 'y']) -> CLTCrossSection:
        if direction == 'x':
            return self.cs_x
        if direction == 'y':
            return self.cs_y
        raise ValueError(f"direction must be 'x' or 'y', got {direction!r}.")
