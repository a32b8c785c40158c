"""Domain layer for QUITANDA.

Contains business rules: the category entity and the errors raised when those
rules are violated. This package is deliberately technology-agnostic.

Dependency rule: do not import from `quitanda.adapters` or `quitanda.entrypoints`.
"""
