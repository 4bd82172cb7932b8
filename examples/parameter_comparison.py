"""
Compare an undamped pendulum with a damped one, frame by frame.
"""
from pendulum_sim import PendulumParameters
from pendulum_sim.comparison import ParameterComparison

# damping defaults to its catalog comparison value (0.5)
cmp = ParameterComparison(PendulumParameters(simulation_speed=10), "damping")
print(f"{cmp.info.title}: {cmp.info.equation}")
cmp.play()

for second in range(1, 6):
    for _ in range(60):
        cmp.advance(1 / 60)
    baseline, variant = cmp.states
    print(f"t={second}s  undamped θ={baseline.angle_degrees:8.2f}°  damped θ={variant.angle_degrees:8.2f}°")
