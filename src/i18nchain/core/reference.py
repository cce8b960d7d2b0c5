"""Symbolic references between translation keys.

A Ref stored as translation data is a link ("this key means that key"); a
Ref passed as ``default=`` asks for another key's translation when the
requested one is missing. Plain strings are always literal text.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["Ref"]


@dataclass(frozen=True, slots=True)
class Ref:
    """Reference to another translation key.

    Attributes:
        key: Dotted key of the target translation

    Example:
        >>> backend.store_translations("en", {"ok": "OK", "confirm": Ref("ok")})
        >>> backend.translate("en", "confirm")
        'OK'
        >>> backend.translate("en", "cancel", default=Ref("ok"))
        'OK'
    """

    key: str

    def __post_init__(self) -> None:
        """Reject empty targets.

        Raises:
            ValueError: If key is empty
        """
        if not self.key:
            msg = "Ref key cannot be empty"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.key
