"""Bootstrap (composition root) for QUITANDA.

Wires concrete adapters (category stores, notifiers, id generators) into the
service-layer `CategoryManager` and reads configuration where needed.

Import rules:
- Entry points import *this* package rather than adapters or the service layer.
- This package may import `quitanda.adapters`, `quitanda.service_layer`,
  `quitanda.interfaces`, `quitanda.domain`, and `quitanda.config`.
- Inner layers must not import `quitanda.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
