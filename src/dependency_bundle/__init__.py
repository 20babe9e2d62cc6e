"""Write-once dependency bundle.

This package provides a small container for passing named dependencies
(loggers, clients, configuration values) to the code that needs them.
A name can be bound only once, so every consumer of a bundle sees the same
object under the same name.

Exports:
- `DependencyBundle`: the container. Seeds `env`, `stdin`, `stdout` and
  `stderr`, exposes every binding as an attribute and offers
  `verify_dependencies()` for fail-fast startup checks.
- `OverrideAttempted`: raised when a name is bound twice.
- `DependencyNotProvided`: raised by `verify_dependencies()` for unbound names.
"""

from ._bundle import DependencyBundle, DependencyBundleError, DependencyNotProvided, OverrideAttempted


__version__ = "0.1.0"

__all__ = ["DependencyBundle", "DependencyBundleError", "DependencyNotProvided", "OverrideAttempted", "__version__"]
