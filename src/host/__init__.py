"""In-process extension host.

Provides the deferred notice board and a reference implementation of the
host capabilities the version gate consumes.
"""

from src.shared.constants import VERSION

__version__ = VERSION
