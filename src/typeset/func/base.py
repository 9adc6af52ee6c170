"""Function — base class of every command kind.

A command kind is a frozen pydantic model whose instances are the typed
command values stored in the syntax tree.  Subclasses supply two hooks and
inherit the generated entry points that wrap them:

- ``from_invocation(cls, header, body, ctx, meta)`` builds a value from one
  invocation.  Any prefix of the four parameters may be declared; the
  wrapper passes only what the hook asks for.  Setting
  ``parse_default = True`` instead skips the hook entirely: the value is
  ``cls()`` and neither arguments nor body are looked at.
- ``async def commands(self, ctx)`` (or ``commands(self)``) produces the
  layout directives.  A kind may leave it out; its values then produce no
  output.

:meth:`Function.parse` and :meth:`Function.layout` are what the parser and
the layout engine call.  Both turn :class:`~typeset.func.errors.FuncAbort`
into a returned failure, and ``parse`` rejects leftover arguments::

    class Bold(Function):
        body_policy = BodyPolicy.FORBIDDEN

        @classmethod
        def from_invocation(cls, header, body):
            forbidden(body)
            return cls()

        async def commands(self, ctx):
            return [SetTextStyle(style=ctx.style.model_copy(update={"bold": True}))]
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from types import NoneType
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel

from typeset.func.body import BodyPolicy
from typeset.func.errors import FuncAbort, unexpected_arguments
from typeset.func.result import FuncResult

if TYPE_CHECKING:
    from typeset.layout.commands import Commands
    from typeset.layout.context import LayoutContext
    from typeset.syntax.args import FuncHeader
    from typeset.syntax.parser import ParseContext

logger = logging.getLogger(__name__)

_MAX_PARSE_PARAMS = 4  # header, body, ctx, meta
_MAX_LAYOUT_PARAMS = 2  # self, ctx


def _positional_arity(func: Callable[..., Any], limit: int, what: str) -> int:
    """Number of positional parameters *func* declares, capped by *limit*."""
    count = 0
    for param in inspect.signature(func).parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return limit
        if param.kind is inspect.Parameter.KEYWORD_ONLY:
            if param.default is inspect.Parameter.empty:
                msg = f"{what} must not require keyword-only parameter {param.name!r}"
                raise TypeError(msg)
        elif param.kind is not inspect.Parameter.VAR_KEYWORD:
            count += 1
    if count > limit:
        msg = f"{what} takes at most {limit} parameters, declares {count}"
        raise TypeError(msg)
    return count


class Function(BaseModel):
    """Base of all command kinds.

    Class attributes:
        meta_type: Type of the per-kind metadata threaded into every parse
            call.  ``NoneType`` means the kind has no custom metadata and
            receives ``None``.
        body_policy: Body admission rule of the kind.
        parse_default: Use ``cls()`` as the parsed value without a hook.
        stateful: Layout output may switch the text style or alignment for
            the siblings that follow.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    meta_type: ClassVar[type[Any]] = NoneType
    body_policy: ClassVar[BodyPolicy] = BodyPolicy.FORBIDDEN
    parse_default: ClassVar[bool] = False
    stateful: ClassVar[bool] = False

    _parse_arity: ClassVar[int] = 0
    _layout_arity: ClassVar[int | None] = None

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        name = cls.__name__

        hook = getattr(cls, "from_invocation", None)
        if cls.parse_default and hook is not None:
            msg = f"{name} declares both parse_default and from_invocation"
            raise TypeError(msg)
        if not cls.parse_default and hook is None:
            msg = f"{name} must define from_invocation or set parse_default"
            raise TypeError(msg)
        if hook is not None:
            cls._parse_arity = _positional_arity(
                hook, _MAX_PARSE_PARAMS, f"{name}.from_invocation"
            )

        layout_hook = getattr(cls, "commands", None)
        if layout_hook is None:
            cls._layout_arity = None
        elif not inspect.iscoroutinefunction(layout_hook):
            msg = f"{name}.commands must be a coroutine function (async def)"
            raise TypeError(msg)
        else:
            cls._layout_arity = _positional_arity(
                layout_hook, _MAX_LAYOUT_PARAMS, f"{name}.commands"
            )

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @classmethod
    def default_meta(cls) -> Any:
        """Metadata used when a registration supplies none."""
        if cls.meta_type is NoneType:
            return None
        return cls.meta_type()

    # ------------------------------------------------------------------
    # Parse capability
    # ------------------------------------------------------------------

    @classmethod
    def parse(
        cls,
        header: FuncHeader,
        body: str | None,
        ctx: ParseContext,
        meta: Any = None,
    ) -> FuncResult[Function]:
        """Build a command value from one invocation.

        *header* is consumed: its arguments are removed as the hook takes
        them, and any that remain fail the call with
        ``"unexpected arguments"``.
        """
        if meta is None:
            meta = cls.default_meta()

        try:
            if cls.parse_default:
                value: Any = cls()
            else:
                params = (header, body, ctx, meta)[: cls._parse_arity]
                value = cls.from_invocation(*params)  # type: ignore[attr-defined]
        except FuncAbort as abort:
            logger.debug("%s rejected %s: %s", cls.__name__, header.name, abort.error)
            return FuncResult.failure(abort.error)

        if isinstance(value, FuncResult):
            if not value.ok:
                return value
            value = value.value

        if not header.args.is_empty():
            logger.debug("%s left arguments unconsumed: %s", cls.__name__, header.args)
            return FuncResult.failure(unexpected_arguments(**header.args.leftovers()))

        return FuncResult.success(value)

    # ------------------------------------------------------------------
    # Layout capability
    # ------------------------------------------------------------------

    @classmethod
    def supports_layout(cls) -> bool:
        """Whether the kind defines a ``commands`` hook."""
        return cls._layout_arity is not None

    def affects_state(self) -> bool:
        """Whether siblings after this value must see the state it leaves behind."""
        return self.stateful

    async def layout(self, ctx: LayoutContext) -> FuncResult[Commands]:
        """Produce this value's layout directives under *ctx*."""
        arity = self._layout_arity
        if arity is None:
            return FuncResult.success([])

        hook = self.commands  # type: ignore[attr-defined]
        try:
            output = await (hook(ctx) if arity == _MAX_LAYOUT_PARAMS else hook())
        except FuncAbort as abort:
            logger.debug("%s layout failed: %s", type(self).__name__, abort.error)
            return FuncResult.failure(abort.error)

        if isinstance(output, FuncResult):
            if not output.ok:
                return output
            output = output.value
        return FuncResult.success(list(output or ()))
