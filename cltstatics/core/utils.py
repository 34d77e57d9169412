
KN_TO_N = 1e3
KNM_TO_NMM = 1e6


class ConfigurationError(ValueError):
    """Raised when a cross-section cannot be built from its input.

    Covers mismatched input lengths, non-positive thicknesses, widths or
    material values, unsupported orientations and stacks without any
    lamella parallel to the analysed axis (whose center of gravity would be
    undefined).
    """


def rectangular_torsion(long_side: float, short_side: float):
    r"""Torsional constants of a solid rectangle.

    Parameters
    ----------
    long_side : :any:`float`
        Longer side of the rectangle.
    short_side : :any:`float`
        Shorter side of the rectangle.

    Returns
    -------
    :any:`tuple`
        ``(torsional_inertia, torsional_modulus)``.

    Notes
    -----
    With :math:`r = L / s`:

    .. math::
        c_1 = \frac{1}{3}\left(1 - \frac{0.63}{r} + \frac{0.052}{r^5}\right),
        \qquad
        c_2 = 1 - \frac{0.65}{1 + r^3}

    .. math::
        I_T = c_1 L s^3, \qquad W_T = \frac{c_1}{c_2} L s^2

    Examples
    --------
    >>> i_t, w_t = rectangular_torsion(1000, 100)
    >>> round(i_t / 1e6, 2)
    312.33
    """
    if long_side < short_side:
        long_side, short_side = short_side, long_side
    if short_side <= 0:
        raise ConfigurationError('Both sides must be greater than zero.')
    r = long_side / short_side
    c1 = (1 - 0.63 / r + 0.052 / r ** 5) / 3
    c2 = 1 - 0.65 / (1 + r ** 3)
    return c1 * long_side * short_side ** 3, c1 / c2 * long_side * short_side ** 2
