"""
Adapters - sources of busy spans outside the engine.
"""

from .busy_file import FileBusySource

__all__ = ["FileBusySource"]
