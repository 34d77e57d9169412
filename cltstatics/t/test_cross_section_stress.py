
from unittest import TestCase

import numpy as np
from numpy.testing import assert_allclose as numpy_allclose

from cltstatics.core.postprocessing import CLTCrossSectionStress
from cltstatics.core.preprocessing import CLTCrossSection, CLTMaterial


def assert_allclose(actual, desired, err_msg=''):
    numpy_allclose(actual, desired, err_msg=err_msg, atol=1e-10, rtol=1e-9)


C24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1, name='C24')
C16 = CLTMaterial(8000, 8.5, 17, 16, 3.2, 0.9, name='C16')


class TestNormalStress(TestCase):

    def test_symmetric(self):
        cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24] * 3)
        tension, compression = CLTCrossSectionStress(cs).normal_stress(100)
        assert_allclose(tension, [1.25, 0, 1.25])
        assert_allclose(compression, [0, 0, 0])
        tension, compression = CLTCrossSectionStress(cs).normal_stress(-100)
        assert_allclose(tension, [0, 0, 0])
        assert_allclose(compression, [-1.25, 0, -1.25])

    def test_equilibrium(self):
        cs = CLTCrossSection(
            [30, 20, 30, 20, 30], [0, 90, 0, 90, 0],
            [C24, C24, C16, C24, C24]
        )
        stress = CLTCrossSectionStress(cs)
        for n in (250.0, -80.0, 1e-3):
            tension, compression = stress.normal_stress(n)
            sigma = tension + compression
            assert_allclose(
                np.sum(sigma * cs.thicknesses) * cs.width / 1e3, n,
                err_msg='The lamella forces must add up to the normal force.'
            )
            e = np.array([layer.material.young_mod for layer in cs.layers])
            assert_allclose(
                sigma[cs.active] / e[cs.active],
                n * 1e3 / (cs.width * cs.ae_eff),
                err_msg='All 0° lamellae must share the same strain.'
            )

    def test_stiffness_distribution(self):
        cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24, C24, C16])
        tension, _ = CLTCrossSectionStress(cs).normal_stress(100)
        assert_allclose(tension[0] / tension[2], 11000 / 8000)
        self.assertEqual(tension[1], 0)

    def test_zero_force(self):
        cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24] * 3)
        tension, compression = CLTCrossSectionStress(cs).normal_stress(0)
        assert_allclose(tension, [0, 0, 0])
        assert_allclose(compression, [0, 0, 0])


class TestBendingStress(TestCase):

    def test_rectangle(self):
        h, b = 100.0, 1000.0
        cs = CLTCrossSection([h], [0], [C24], width=b)
        sigma = CLTCrossSectionStress(cs).bending_stress(m_yy=10)
        w = b * h ** 2 / 6
        assert_allclose(sigma, [[-10e6 / w, 0, 10e6 / w]])

    def test_symmetric(self):
        cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24] * 3)
        sigma = CLTCrossSectionStress(cs).bending_stress(m_yy=10)
        self.assertEqual(sigma.shape, (3, 3))
        i = cs.mom_of_int
        assert_allclose(sigma[0], 1e7 / i * np.array([-60, -40, -20]))
        assert_allclose(sigma[1], [0, 0, 0])
        assert_allclose(sigma[2], -sigma[0][::-1])

    def test_section_modulus(self):
        cs = CLTCrossSection([30, 20, 40], [0, 90, 0], [C24, C24, C16])
        sigma = CLTCrossSectionStress(cs).bending_stress(m_yy=-7)
        w = cs.section_moduli
        for i, layer in enumerate(cs.layers):
            if not layer.is_active:
                continue
            ratio = layer.material.young_mod / cs.e_ref
            assert_allclose(
                np.abs(sigma[i]), ratio * 7e6 / w[i],
                err_msg='|σ| must equal E_i/E_ref · M / W_net.'
            )

    def test_repeated_calls(self):
        cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24] * 3)
        stress = CLTCrossSectionStress(cs)
        first = stress.bending_stress(m_yy=10)
        stress.bending_stress(m_yy=50)
        assert_allclose(stress.bending_stress(m_yy=10), first)
        assert_allclose(stress.bending_stress(m_yy=20), 2 * first)


class TestShearStress(TestCase):

    def test_rectangle(self):
        h, b = 100.0, 1000.0
        cs = CLTCrossSection([h], [0], [C24], width=b)
        tau = CLTCrossSectionStress(cs).shear_stress(v_z=20)
        assert_allclose(
            tau, [[0, 1.5 * 20e3 / (b * h), 0]],
            err_msg='The maximum shear stress of a rectangle is 1.5 V / A.'
        )

    def test_layout(self):
        cs = CLTCrossSection([40, 20, 60], [0, 90, 0], [C24] * 3)
        tau = CLTCrossSectionStress(cs).shear_stress(v_z=30)
        profile = cs.static_moment_profile()
        self.assertEqual([len(t) for t in tau], [len(s) for s in profile])
        for t, s in zip(tau, profile):
            assert_allclose(
                t, 30e3 * np.array(s) / (cs.mom_of_int * cs.width)
            )

    def test_symmetric(self):
        cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24] * 3)
        tau = CLTCrossSectionStress(cs).shear_stress(v_z=13.5)
        factor = 13.5e3 / (cs.mom_of_int * 1000)
        assert_allclose(tau[1], [factor * 1.6e6])
        assert_allclose(tau[0], factor * np.array([0, 1e6, 1.6e6]))


class TestCombinedAndDisc(TestCase):

    def setUp(self):
        self.cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [C24] * 3)
        self.stress = CLTCrossSectionStress(self.cs)

    def test_combined(self):
        combined = self.stress.combined_stress(n=100, m_yy=10)
        expected = self.stress.bending_stress(10) + np.array(
            [[1.25], [0], [1.25]]
        )
        assert_allclose(combined, expected)

    def test_normal_disc(self):
        depths, sigma = self.stress.normal_stress_disc(-100)
        assert_allclose(depths, [0, 40, 40, 80, 80, 120])
        assert_allclose(sigma, [-1.25, -1.25, 0, 0, -1.25, -1.25])

    def test_bending_disc(self):
        depths, sigma = self.stress.bending_stress_disc(10)
        assert_allclose(depths, [0, 20, 40, 40, 60, 80, 80, 100, 120])
        assert_allclose(sigma, self.stress.bending_stress(10).ravel())

    def test_shear_disc(self):
        depths, tau = self.stress.shear_stress_disc(10)
        assert_allclose(depths, [0, 20, 40, 40, 80, 100, 120])
        self.assertEqual(tau.shape, (7,))
        self.assertEqual(tau[0], 0)
