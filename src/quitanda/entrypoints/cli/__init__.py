"""The ``quitanda`` command-line interface."""
