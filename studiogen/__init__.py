# studiogen: Android Studio project skeleton generator
from studiogen.core.constants import APP_VERSION as __version__

__all__ = ["__version__"]
