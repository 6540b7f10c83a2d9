"""
Ball Clock Simulator

Core modules:
- engine: track capacities and the per-minute tick rules
- models: core dataclasses
- snapshots: read-only track snapshots and their compact JSON form
- simulation: cycle-length and fixed-horizon drivers
"""
