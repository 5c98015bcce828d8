# # Teaching scenarios

# Draw every scenario of the library on top of the normal loop.

import matplotlib.pyplot as plt

from pvloop import geometry, solver
from pvloop.scenarios import SCENARIOS

baseline = solver.baseline_state()
normal = geometry.build_loop(baseline, 2.5, 0.02)

keys = [k for k in SCENARIOS if k != "normal"]
fig, axes = plt.subplots(2, 4, sharex=True, sharey=True, figsize=(16, 8))
for ax, key in zip(axes.flat, keys):
    scenario = SCENARIOS[key]
    p = scenario.parameters
    state = solver.solve(p)
    loop = geometry.build_loop(state, p.contractility, p.compliance_alpha)

    ax.plot(normal.volumes, normal.pressures, color="gray", label="Normal")
    ax.plot(loop.volumes, loop.pressures, color="tab:red", label=scenario.name)
    for curve in geometry.boundary_curves(p.contractility, p.compliance_alpha).values():
        ax.plot(curve[:, 0], curve[:, 1], "--", color="tab:red", linewidth=0.8)
    ax.set_title(f"{scenario.name}\nEF {state.EF:.0f}%")
    ax.set_xlim(0, 220)
    ax.set_ylim(0, 240)

for ax in axes[-1]:
    ax.set_xlabel("V [mL]")
for ax in axes[:, 0]:
    ax.set_ylabel("p [mmHg]")
plt.show()
