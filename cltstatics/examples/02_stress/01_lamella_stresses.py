"""
Example 01:
Lamella stresses and characteristic capacities

Normal, bending and shear stresses of a 3-layer panel under a set of
internal forces per metre width, followed by the characteristic
capacities of the cross-section.
"""

import matplotlib.pyplot as plt

from cltstatics.core.preprocessing import CLTCrossSection, CLTMaterial
from cltstatics.core.postprocessing import (
    CLTCapacity, CLTCrossSectionStress, plot_stress
)


c24 = CLTMaterial(11000, 14.5, 21, 24, 4.0, 1.1, name='C24')
cs = CLTCrossSection([40, 40, 40], [0, 90, 0], [c24] * 3)

# 1. Internal forces (per metre width)
N = -150    # kN
M = 12      # kNm
V = 13.5    # kN

# 2. Stresses
stress = CLTCrossSectionStress(cs)
tension, compression = stress.normal_stress(N)
print("Normal stress (compression) :", compression)
print("Bending stress (top/mid/bottom):")
print(stress.bending_stress(M))
print("Shear stress per profile point:")
for i, tau in enumerate(stress.shear_stress(V)):
    print(f"  lamella {i}: {[round(t, 4) for t in tau]}")

# 3. Characteristic capacities
capacity = CLTCapacity(cs)
for mode, value in capacity.capacities().items():
    print(f"{mode:12s}: {value:10.2f}  "
          f"(lamella {capacity.governing_layer(mode)})")

# 4. Plot
fig, axes = plt.subplots(1, 3, sharey=True, figsize=(10, 4))
plot_stress(stress, 'normal', n=N, ax=axes[0])
plot_stress(stress, 'bending', m_yy=M, ax=axes[1])
plot_stress(stress, 'shear', v_z=V, ax=axes[2])
plt.show()
