# folio/logging/tags.py
"""
Logging subsystem tags.

Prefixed to log messages so output stays searchable per subsystem.
"""

PARSE = "[PARSE]"
SERIALIZE = "[SERIALIZE]"
SCAN = "[SCAN]"
VALIDATION = "[VALIDATION]"
CONFIG = "[CONFIG]"
CLI = "[CLI]"
