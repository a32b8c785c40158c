"""Adapters (infrastructure) for QUITANDA.

Provide concrete implementations of the application ports (category stores,
event notifiers, ID generators), plus persistence mapping and related wiring
(engines, metadata, migrations).

Dependency rule: may import `quitanda.domain` and `quitanda.interfaces`; those
packages must not import this one.
"""
