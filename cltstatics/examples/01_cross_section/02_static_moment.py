"""
Example 02:
Static moment profile

The static moments are evaluated at the top, mid and bottom of every 0°
lamella (plus the center of gravity if it lies inside one) and carried
unchanged through the 90° lamellae.
"""

from cltstatics.core.preprocessing import CLTCrossSection, CLTMaterial


c24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1, name='C24')
c16 = CLTMaterial(8000, 8.5, 17, 16, 3.2, 0.9, name='C16')

# Asymmetric build-up, the center of gravity lies inside the last lamella
cs = CLTCrossSection(
    thicknesses=[40, 20, 60],
    orientations=[0, 90, 0],
    materials=[c24, c16, c24],
)

print(cs.static_moment.table())
print(f"Maximum static moment: {cs.static_moment.maximum:.0f} mm³")
