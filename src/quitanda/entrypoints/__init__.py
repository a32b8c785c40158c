"""Entrypoints (inbound adapters) for QUITANDA.

Expose the application to the outside world. Today that is the ``quitanda``
command-line tool (logging setup and database management); category use-cases
are reached through `quitanda.bootstrap`.

Dependency rule: may import `quitanda.bootstrap` and `quitanda.config`; avoid
importing `quitanda.adapters` directly except for database plumbing.
"""
