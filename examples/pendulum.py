"""
Host loop: fake 60 Hz animation frames driving the engine, printed as text.
"""

from pendulum_sim import ParameterStore, IntegrationEngine, FrameClock
from pendulum_sim.renderer import DebugRenderer

store = ParameterStore()
store.set(length=80, damping=0.1)
engine = IntegrationEngine(store)
clock = FrameClock(max_frame_delta=0.1)
renderer = DebugRenderer()

engine.play()
for frame in range(180):
    clock.drive(engine, frame * 1000 / 60)
    if frame % 30 == 0:
        renderer.render_engine(engine)

print("energy:", engine.energy(), "steps:", engine.steps_taken, "skipped:", engine.skipped_steps)
