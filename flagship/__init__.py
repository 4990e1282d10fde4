__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'flagship'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.1.0"

from .arguments import *
from .config import *
from .faults import *
from .files import *
from .flags import *
from .lists import *
from .paths import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 1, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the argument capture
__all__ += arguments.__all__  # type: ignore[attr-defined]
# Load the exposed API of the option store
__all__ += config.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the file helpers
__all__ += files.__all__  # type: ignore[attr-defined]
# Load the exposed API of the flag conversion
__all__ += flags.__all__  # type: ignore[attr-defined]
# Load the exposed API of the list filters
__all__ += lists.__all__  # type: ignore[attr-defined]
# Load the exposed API of the path searches
__all__ += paths.__all__  # type: ignore[attr-defined]
