from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ..core.value import Length


class LengthExtension(Protocol):
    """Protocol for behaviors attached to every length.

    The length the behavior is looked up on is passed as the first argument.
    """

    def __call__(self, length: Length, /, *args: Any, **kwargs: Any) -> Any:
        ...
