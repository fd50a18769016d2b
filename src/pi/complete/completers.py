"""Named completer strategies and the first-match dispatch over them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Iterable, Iterator

from pi.complete.candidates import Candidate
from pi.complete.tokens import Token

if TYPE_CHECKING:
    from pi.complete.context import EditorContext

logger = logging.getLogger(__name__)

Strategy = Callable[[Any, "EditorContext"], "list[Candidate] | None"]


@dataclass(frozen=True)
class Completer:
    """A strategy with the name shown to the user while it is completing.

    The strategy returns ``None`` when the node is not something it
    completes, and a (possibly empty) list of candidates otherwise.
    """

    name: str
    strategy: Strategy

    def try_complete(
        self, node: Any, ctx: EditorContext
    ) -> tuple[str, list[Candidate]] | None:
        candidates = self.strategy(node, ctx)
        if candidates is None:
            return None
        return self.name, list(candidates)


class CompleterChain:
    """Completers consulted in registration order; the first to apply wins."""

    def __init__(self, completers: Iterable[Completer] | None = None) -> None:
        self._completers: list[Completer] = list(completers or [])

    def __iter__(self) -> Iterator[Completer]:
        return iter(self._completers)

    def __len__(self) -> int:
        return len(self._completers)

    def register(self, completer: Completer) -> None:
        """Append *completer* after all existing ones."""
        self._completers.append(completer)

    def add(self, name: str, strategy: Strategy) -> Completer:
        completer = Completer(name, strategy)
        self.register(completer)
        return completer

    def names(self) -> list[str]:
        return [c.name for c in self._completers]

    def dispatch(
        self, token: Token, ctx: EditorContext
    ) -> tuple[str, list[Candidate]] | None:
        """Return the name and candidates of the first applicable completer.

        An empty candidate list still counts as applicable and stops the
        search. Returns ``None`` for an invalid token or when every completer
        declines. A strategy that raises is logged and treated as declining.
        """
        if not token.is_valid:
            logger.debug("no token under cursor, skipping completers")
            return None

        for completer in self._completers:
            try:
                result = completer.try_complete(token.node, ctx)
            except Exception:
                logger.exception("completer %r failed", completer.name)
                continue
            if result is not None:
                logger.debug(
                    "completer %r matched with %d candidates",
                    completer.name,
                    len(result[1]),
                )
                return result

        logger.debug("no completer applies to %r", token.node)
        return None
