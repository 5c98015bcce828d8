# # Pressure-volume loop

# In this example we compute the pressure-volume loop of a normal left ventricle
# and of a ventricle with increased contractility, and draw both together with
# their boundary curves.

from pvloop.model import PressureVolumeLoop
import matplotlib.pyplot as plt

normal = PressureVolumeLoop()
normal.print_info()

inotropic = PressureVolumeLoop(parameters={"Ees": 4.0})
inotropic.print_info()

fig, ax = plt.subplots(figsize=(7, 6))
for model, label, color in [(normal, "Normal", "tab:blue"), (inotropic, "Ees = 4.0", "tab:red")]:
    history = model.history
    ax.fill(history["V_LV"], history["p_LV"], alpha=0.2, color=color)
    ax.plot(history["V_LV"], history["p_LV"], color=color, label=label)
    curves = model.boundary_curves()
    ax.plot(curves["espvr"][:, 0], curves["espvr"][:, 1], "--", color=color)
    ax.plot(curves["edpvr"][:, 0], curves["edpvr"][:, 1], ":", color=color)

ax.set_xlim(0, 220)
ax.set_ylim(0, 240)
ax.set_xlabel("V [mL]")
ax.set_ylabel("p [mmHg]")
ax.legend()
plt.show()
