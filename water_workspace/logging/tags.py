# water_workspace/logging/tags.py
"""
Subsystem tags prefixed to log messages.

Changing a tag here updates it project-wide.
"""

DISCOVERY = "[DISCOVERY]"
PINS = "[PINS]"
INHERIT = "[INHERIT]"
EMIT = "[EMIT]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
