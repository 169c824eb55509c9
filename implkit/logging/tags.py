# implkit/logging/tags.py
"""
Subsystem tags prefixed to implkit log messages.

Keeping them in one place keeps log output greppable.
"""

REGISTRY = "[REGISTRY]"
RESOLVE = "[RESOLVE]"
CONTRACT = "[CONTRACT]"
CONFIG = "[CONFIG]"
