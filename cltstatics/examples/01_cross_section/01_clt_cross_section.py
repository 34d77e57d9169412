"""
Example 01:
Five-layer CLT panel

This example builds a 5-layer CLT layup, prints the lamellae and the
effective cross-section properties in both principal directions.
"""

from cltstatics.core.preprocessing import CLTLayup, CLTMaterial


# 1. Material of all lamellae (C24)
c24 = CLTMaterial(
    young_mod=11000, f_t0k=14.5, f_c0k=21, f_mk=24, f_vk=4.0, f_rk=1.1,
    name='C24'
)

# 2. Layup 40-20-40-20-40 mm
layup = CLTLayup(
    thicknesses=[40, 20, 40, 20, 40],
    orientations=[0, 90, 0, 90, 0],
    materials=[c24] * 5,
)

# 3. Properties in both directions
for direction in ('x', 'y'):
    cs = layup.cross_section(direction)
    print(f"=== Cross-section in {direction}-direction ===")
    print(cs.table())
    print(f"Center of gravity z_s   : {cs.center_of_gravity:.1f} mm")
    print(f"z_top, z_bottom         : {cs.z_top:.1f} mm, "
          f"{cs.z_bottom:.1f} mm")
    print(f"Net area A              : {cs.area:.0f} mm²")
    print(f"Moment of inertia I     : {cs.mom_of_int:.4e} mm⁴")
    print(f"Torsional inertia I_T   : {cs.torsional_inertia:.4e} mm⁴")
    print()
