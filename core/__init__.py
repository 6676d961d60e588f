"""
Core package for the content core.

This package contains the fundamental components the services and API are
built on:
- errors: Exception hierarchy shared by every layer
- store: Transactional persistence gateway over the database session
- slugs: Unique slug resolution
- security: Settings encryption
- utils: Text helpers such as slugify
- factory: Application factory
- loggings: Application logging and error reporting

Submodules are imported directly (``from core.slugs import ...``); the
package itself imports nothing so extensions and models can depend on it
without cycles.
"""

# Version information
__version__ = '1.0.0'
