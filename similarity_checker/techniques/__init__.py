"""Auto-discovery of technique modules.

Every .py file in this package that defines a `technique` object is
auto-registered by similarity_checker.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the technique files at runtime.
"""

# PyInstaller hidden imports — keep this list in sync with technique modules
import similarity_checker.techniques.all as _all  # noqa: F401
import similarity_checker.techniques.channels as _channels  # noqa: F401
import similarity_checker.techniques.diff as _diff  # noqa: F401
import similarity_checker.techniques.similarity as _similarity  # noqa: F401
