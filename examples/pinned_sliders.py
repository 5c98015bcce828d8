# # Coupled slider exploration

# Moving a single control in manual mode keeps the end-systolic and end-diastolic
# pressures of the normal ventricle fixed. Here we sweep the compliance coefficient
# and show how a stiffer ventricle fills less. Moving the arterial elastance
# decouples the session, after which the loop is solved directly.

import numpy as np
import matplotlib.pyplot as plt

from pvloop import geometry
from pvloop.coupling import Control, Session
from pvloop.display import DisplayArea
from pvloop.readouts import readout_table, readouts
from pvloop.log import log_table, setup_logging

setup_logging()

session = Session()
area = DisplayArea()

fig, ax = plt.subplots(1, 2, figsize=(12, 5))
for alpha in np.linspace(0.01, 0.035, 6):
    session = session.move(Control.COMPLIANCE, alpha)
    state = session.state()
    loop = geometry.build_loop(state, session.sliders.contractility, alpha)
    ax[0].plot(loop.volumes, loop.pressures, label=f"alpha = {alpha:.3f}")

    # Same loop in display coordinates, as a drawing surface would receive it
    xy = area.to_display(loop.points)
    ax[1].plot(xy[:, 0], xy[:, 1])

print(log_table(readout_table(readouts(session.state()), title="Stiffest ventricle")))

session = session.move(Control.AFTERLOAD, 3.0)
print(f"Coupling after moving arterial elastance: {session.coupling.value}")
print(log_table(readout_table(readouts(session.state()), title="Decoupled")))

ax[0].set_xlabel("V [mL]")
ax[0].set_ylabel("p [mmHg]")
ax[0].legend()
ax[1].set_xlim(0, area.width)
ax[1].set_ylim(area.height, 0)
ax[1].set_title("Display coordinates")
plt.show()
