"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-catalog"
PACKAGE_NAME_PYTHON = PACKAGE_NAME.replace("-", "_")
__version__ = "1.0.0"
VERSION = __version__
DESCRIPTION = "Catalogue of classic object-oriented design patterns with runnable demos"

# Environment variable prefix for configuration overrides
ENV_PREFIX = "PATTERN_CATALOG_"
