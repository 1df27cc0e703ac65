"""Allows ``python -m plugin_installer``."""

from .installer import main

main()
