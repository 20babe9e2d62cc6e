from __future__ import annotations

import keyword
import logging
import os
import sys
import threading
from typing import TYPE_CHECKING, Any, overload


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping


_MISSING: Any = object()


class DependencyBundleError(RuntimeError):
    pass


class OverrideAttempted(DependencyBundleError):
    pass


class DependencyNotProvided(DependencyBundleError):
    pass


class DependencyBundle:
    """Write-once registry of named dependencies.

    - every binding is exposed as an attribute (`bundle.logger`)
    - a name can be bound only once; rebinding raises `OverrideAttempted`
    - `env`, `stdin`, `stdout` and `stderr` are bound on construction.

    Example:
      deps = DependencyBundle(logger=log, http=session)
      deps = DependencyBundle(lambda d: d.set("logger", log))

    """

    def __init__(
        self,
        configure: Callable[[DependencyBundle], object] | None = None,
        /,
        **dependencies: Any,
    ) -> None:
        object.__setattr__(self, "_bindings", {})
        object.__setattr__(self, "_lock", threading.RLock())

        self.register_many(
            {
                "env": os.environ,
                "stdin": sys.stdin,
                "stdout": sys.stdout,
                "stderr": sys.stderr,
            }
        )

        if dependencies:
            self.register_many(dependencies)

        if configure is not None:
            configure(self)

    def register_many(self, dependencies: Mapping[str, Any]) -> None:
        """Bind every name in `dependencies`, or none of them if one is rejected."""
        with self._lock:
            for name in dependencies:
                self._check_name(name)

            for name, value in dependencies.items():
                self._bindings[name] = value
                logger.debug("Bound dependency %r (%s)", name, type(value).__name__)

    @overload
    def set(self, name: str, value: Any, /) -> None: ...

    @overload
    def set(self, dependencies: Mapping[str, Any], /) -> None: ...

    def set(self, name: str | Mapping[str, Any], value: Any = _MISSING, /) -> None:
        """Bind a single name, or every pair of a mapping.

        Example:
          deps.set("logger", log)
          deps.set({"logger": log, "http": session})

        """
        if value is _MISSING:
            if isinstance(name, str):
                msg = f"No value given for dependency {name!r}."
                raise TypeError(msg)
            self.register_many(name)
        else:
            self.register_many({name: value})  # type: ignore[dict-item]

    def verify_dependencies(self, *names: str) -> bool:
        """Check that every one of `names` is bound.

        Raises `DependencyNotProvided` listing the unbound names, in the order given.
        """
        if not names:
            msg = "verify_dependencies() expects the names of dependencies to be passed"
            raise TypeError(msg)

        with self._lock:
            not_found = [name for name in names if name not in self._bindings]

        if not_found:
            logger.debug("Missing dependencies: %s", ", ".join(map(str, not_found)))
            msg = f"{not_found!r} not set"
            raise DependencyNotProvided(msg)

        return True

    def _check_name(self, name: object) -> None:
        if not isinstance(name, str):
            msg = f"Dependency names must be strings, not {type(name).__name__}"
            raise TypeError(msg)

        if not name.isidentifier() or keyword.iskeyword(name):
            msg = f"{name!r} is not a valid dependency name; use a Python identifier"
            raise ValueError(msg)

        if name.startswith("_"):
            msg = f"{name!r} is not a valid dependency name; leading underscores are reserved"
            raise ValueError(msg)

        if hasattr(self, name):
            msg = (
                f"You can't override {name!r} on {self!r}, since it already has an attribute named {name!r}. "
                "If you tried to override a dependency, please don't: a logger or http client that differs "
                "between two code paths building the same bundle is miserable to debug. "
                "If a built-in attribute just happens to share this name, register your dependency "
                "under a different one."
            )
            raise OverrideAttempted(msg)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; `_bindings` may be absent mid-construction.
        bindings = self.__dict__.get("_bindings")
        if bindings is not None and name in bindings:
            return bindings[name]

        msg = f"{type(self).__name__!r} object has no dependency {name!r}"
        raise AttributeError(msg)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return

        self.set(name, value)

    def __delattr__(self, name: str) -> None:
        msg = f"Dependencies can't be removed from a {type(self).__name__} (tried to remove {name!r})"
        raise AttributeError(msg)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    def __dir__(self) -> Iterable[str]:
        return [*super().__dir__(), *self._bindings]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {', '.join(self._bindings)}>"
