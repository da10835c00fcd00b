"""Error hierarchy – public re-export surface.

Hierarchy::

    TireError
    ├── ConfigurationError          (search.py)
    ├── MalformedResponseError      (search.py)
    ├── TransportError              (transport.py)
    │   └── TransportTimeoutError
    └── SettingsError               (tire.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from tire.errors.base import TireError
from tire.errors.search import ConfigurationError, MalformedResponseError
from tire.errors.transport import TransportError, TransportTimeoutError

__all__ = [
    "ConfigurationError",
    "MalformedResponseError",
    "TireError",
    "TransportError",
    "TransportTimeoutError",
]
