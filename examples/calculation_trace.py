"""
Print the step-by-step calculation of the next integration step.
"""
from pendulum_sim import ParameterStore, IntegrationEngine
from pendulum_sim.trace import explain_step

store = ParameterStore()
store.set(damping=0.2)
engine = IntegrationEngine(store)
engine.play()
engine.advance(0.05)

for i, step in enumerate(explain_step(engine.state, store.params), 1):
    print(f"Step {i}: {step.description}")
    print("   ", step.equation)
    print("   ", step.calculation)
    print("   ", step.result)
