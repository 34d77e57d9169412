
from dataclasses import replace
from unittest import TestCase

from numpy.testing import assert_allclose as numpy_allclose

from cltstatics.core.postprocessing import CLTCapacity
from cltstatics.core.preprocessing import CLTCrossSection, CLTMaterial


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-9)


C24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1, name='C24')
C16 = CLTMaterial(8000, 8.5, 17, 16, 3.2, 0.9, name='C16')

MODES = {
    'tension': 'f_t0k',
    'compression': 'f_c0k',
    'bending': 'f_mk',
    'shear': 'f_vk',
}


class TestCLTCapacity(TestCase):

    def setUp(self):
        self.cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24] * 3)
        self.capacity = CLTCapacity(self.cs)

    def test_axial(self):
        assert_allclose(self.capacity.tension, 14.5 * 80)
        assert_allclose(self.capacity.compression, 21 * 80)

    def test_bending(self):
        assert_allclose(
            self.capacity.bending, 24 * self.cs.mom_of_int / 60 / 1e6,
            err_msg='The outer fibre must govern the bending capacity.'
        )

    def test_shear(self):
        i = self.cs.mom_of_int
        assert_allclose(
            self.capacity.shear, 1.1 * i / 1.6e6,
            err_msg='Rolling shear in the 90° lamella must govern.'
        )
        self.assertEqual(self.capacity.governing_layer('shear'), 1)

    def test_rectangle(self):
        h = 100.0
        cs = CLTCrossSection([h], [0], [C24])
        capacity = CLTCapacity(cs)
        assert_allclose(capacity.tension, 14.5 * h)
        assert_allclose(capacity.bending, 24 * 1000 * h ** 2 / 6 / 1e6)
        assert_allclose(
            capacity.shear, 4.0 * 1000 * h / 1.5 / 1e3,
            err_msg='V_k of a rectangle is f_vk · A / 1.5.'
        )

    def test_capacities(self):
        capacities = self.capacity.capacities()
        self.assertEqual(
            set(capacities), {'tension', 'compression', 'bending', 'shear'}
        )
        assert_allclose(capacities['tension'], self.capacity.tension)

    def test_mixed_materials(self):
        cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24, C24, C16])
        capacity = CLTCapacity(cs)
        ae_eff = 11000 * 40 + 8000 * 40
        assert_allclose(
            capacity.tension, min(14.5 * ae_eff / 11000, 8.5 * ae_eff / 8000)
        )
        self.assertEqual(capacity.governing_layer('tension'), 2)

    def test_width(self):
        narrow = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24] * 3,
                                 width=500)
        capacity = CLTCapacity(narrow)
        for mode, value in self.capacity.capacities().items():
            assert_allclose(
                getattr(capacity, mode), value / 2,
                err_msg=f'Halving the width must halve the {mode} capacity.'
            )

    def test_weakest_link(self):
        materials = [C24, C16, C24, C16, C24]
        thicknesses = [30, 20, 40, 20, 30]
        orientations = [0, 90, 0, 90, 0]
        base = CLTCapacity(
            CLTCrossSection(thicknesses, orientations, materials)
        )
        for mode, attr in MODES.items():
            reference = getattr(base, mode)
            governing = base.governing_layer(mode)
            for idx in (0, 2, 4):
                stronger = list(materials)
                mat = stronger[idx]
                stronger[idx] = replace(mat, **{attr: getattr(mat, attr) * 2})
                value = getattr(CLTCapacity(
                    CLTCrossSection(thicknesses, orientations, stronger)
                ), mode)
                self.assertGreaterEqual(value, reference - 1e-9)
                if idx != governing:
                    assert_allclose(
                        value, reference,
                        err_msg=f'Strengthening a non-governing lamella must '
                                f'not change the {mode} capacity.'
                    )

    def test_invalid_mode(self):
        with self.assertRaises(ValueError):
            self.capacity.governing_layer('torsion')
