import logging
import threading
from typing import Callable, Iterator, overload

from ..schemas.extensions import ExtensionConfig
from .base import LengthExtension

logger = logging.getLogger(__name__)


class ExtensionRegistry:
    """Named behaviors made available as methods on every `Length`.

    Registered behaviors never touch the `Length` class itself; they are
    resolved at attribute lookup time and bound to the instance.
    """

    def __init__(self, cfg: ExtensionConfig | None = None):
        self.cfg = cfg or ExtensionConfig()
        self._extensions: dict[str, LengthExtension] = {}
        self._lock = threading.Lock()

    @overload
    def register(
        self, name: str, func: None = None, *, replace: bool = False
    ) -> Callable[[LengthExtension], LengthExtension]: ...

    @overload
    def register(
        self, name: str, func: LengthExtension, *, replace: bool = False
    ) -> LengthExtension: ...

    def register(self, name, func=None, *, replace=False):
        """Register `func` under `name`. Without `func`, acts as a decorator."""
        if func is None:
            def decorator(f: LengthExtension) -> LengthExtension:
                return self.register(name, f, replace=replace)

            return decorator

        self._check_name(name)
        if not callable(func):
            raise TypeError(f"Extension '{name}' must be callable, got {func!r}.")

        with self._lock:
            if name in self._extensions and not replace:
                msg = f"Extension '{name}' is already registered."
                if self.cfg.strict:
                    raise ValueError(msg)
                if self.cfg.conflict_policy == "warn":
                    logger.warning(f"{msg} Replacing it.")
            self._extensions[name] = func

        logger.debug("Registered length extension %r", name)
        return func

    def unregister(self, name: str) -> LengthExtension:
        with self._lock:
            try:
                func = self._extensions.pop(name)
            except KeyError:
                raise KeyError(f"No extension registered under '{name}'.") from None
        logger.debug("Unregistered length extension %r", name)
        return func

    def get(self, name: str) -> LengthExtension | None:
        return self._extensions.get(name)

    def names(self) -> tuple[str, ...]:
        return tuple(self._extensions)

    def clear(self) -> None:
        with self._lock:
            self._extensions.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._extensions

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._extensions)

    @staticmethod
    def _check_name(name: str) -> None:
        from ..core.value import Length

        if not isinstance(name, str) or not name.isidentifier():
            raise ValueError(f"Extension name must be an identifier, got {name!r}.")
        if name.startswith("_"):
            raise ValueError(f"Extension name must not be private, got '{name}'.")
        if hasattr(Length, name) or name in Length.model_fields:
            raise ValueError(f"Extension '{name}' would shadow a built-in Length attribute.")


# Default registry, exposed as `length.fn`.
extensions = ExtensionRegistry()
