"""FuncResult — success-or-error carrier returned by parse and layout calls.

INVARIANT: exactly one of ``value``/``error`` is meaningful, selected by ``ok``.
A failed call yields nothing usable; there is no partial success.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from typeset.func.errors import FuncAbort, TypesetError

if TYPE_CHECKING:
    from typeset.func.base import Function
    from typeset.layout.commands import Commands

T = TypeVar("T")


@dataclass(frozen=True)
class FuncResult(Generic[T]):
    """Outcome of one parse or layout call.

    Attributes:
        ok: Whether the call succeeded.
        value: The produced value on success.
        error: The failure on error.
    """

    ok: bool
    value: T | None = None
    error: TypesetError | None = None

    @classmethod
    def success(cls, value: T) -> FuncResult[T]:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: TypesetError) -> FuncResult[Any]:
        return cls(ok=False, error=error)

    def unwrap(self) -> T:
        """Return the value or abort the running hook with the error.

        Inside a parse or layout hook this forwards a nested failure to the
        caller unchanged; elsewhere the :class:`FuncAbort` propagates.
        """
        if not self.ok:
            assert self.error is not None
            raise FuncAbort(self.error)
        return self.value  # type: ignore[return-value]


ParseResult = FuncResult["Function"]
LayoutResult = FuncResult["Commands"]
