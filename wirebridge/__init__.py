"""wirebridge: client-side bridge to a remote browser-automation server.

Import the public surface from ``wirebridge.api``.
"""

__version__ = "0.1.0"
