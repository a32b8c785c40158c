"""Interfaces (application boundary) for QUITANDA.

Defines framework-free application contracts: ABCs and small helpers shared by
the service layer and adapters (category store, event notifier, ID
generators). Business rules stay out of this package.

Dependency rule: this package may import `quitanda.domain` for the entity it
stores, but nothing else from `quitanda.*`. It may be imported by
`quitanda.service_layer`, `quitanda.adapters`, and `quitanda.bootstrap`.
"""
