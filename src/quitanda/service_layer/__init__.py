"""Service layer for QUITANDA.

Implements application use-cases: the category manager, its input commands and
the caller context threaded through mutating operations. Calls domain objects
and the outbound ports defined in `quitanda.interfaces`.

Dependency rule: may import `quitanda.domain` and `quitanda.interfaces`, but not
`quitanda.adapters` or `quitanda.entrypoints`.
"""
