"""
Core Business Logic
==================

Core modules for defining and running experiments.

Modules:
- data: Data holders shared between experiment actions
- actions: Experiment actions, including REST actions against the frontend
- experiment: Sequential experiment runner
"""
