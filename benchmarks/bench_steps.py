"""
Microbenchmark: cost of advance() vs fixed steps per frame.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from pendulum_sim.engine import IntegrationEngine
from pendulum_sim.params import ParameterStore
from pendulum_sim.profiler import Profiler

def run(time_interval: float, damping: float, frames: int = 600):
    prof = Profiler()
    store = ParameterStore()
    store.set(time_interval=time_interval, damping=damping, simulation_speed=1)
    engine = IntegrationEngine(store, profiler=prof)
    engine.play()

    rng = np.random.default_rng(12345)  # determinism (frame jitter only)
    deltas = np.clip(rng.normal(1 / 60, 0.002, size=frames), 0.0, None)

    # warmup
    for _ in range(30):
        engine.advance(1 / 60)
    warm_steps = engine.steps_taken
    prof.stats.clear()

    t0 = time.perf_counter()
    for dt in deltas:
        engine.advance(float(dt))
    t1 = time.perf_counter()

    total = t1 - t0
    per_frame = total / frames
    return store.params.time_interval, per_frame, engine.steps_taken - warm_steps, prof.stats.summary()

if __name__ == "__main__":
    for damping in [0.0, 0.5]:
        for ti in [0.01, 0.005, 0.001]:
            dt, per_frame, steps, summary = run(ti, damping)
            print(f"damping={damping:.1f} dt={dt:<7g} frame={1e3*per_frame:8.3f} ms  steps={steps:7d}")
            print(" ", "advance", summary["advance"])
        print()
