"""Key stroke resolution against a keymap registry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from textrighter.runtime.telemetry import span

from .models import Binding, KeyCommand, KeyStroke
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    binding: Optional[Binding] = None

    @property
    def command(self) -> Optional[KeyCommand]:
        return self.binding.command if self.binding else None


class KeymapResolver:
    """Maps a key stroke in a mode to the bound :class:`KeyCommand`.

    Lookup tables are built per mode and rebuilt whenever the registry
    revision changes.
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name
        self._cache: Dict[str, tuple[int, Dict[str, Binding]]] = {}

    @property
    def registry(self) -> KeymapRegistry:
        return self._registry

    def resolve(self, mode: str, stroke: KeyStroke) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "token": stroke.token},
        ) as handle:
            binding = self._table(mode).get(stroke.token)
            if binding is None:
                handle.add_metadata("status", "miss")
                return ResolutionResult(status="miss")
            handle.add_metadata("status", "match")
            handle.add_metadata("binding_id", binding.id)
            return ResolutionResult(status="match", binding=binding)

    def reset(self, mode: Optional[str] = None) -> None:
        if mode is None:
            self._cache.clear()
        else:
            self._cache.pop(mode, None)

    def _table(self, mode: str) -> Dict[str, Binding]:
        revision = self._registry.revision()
        cached = self._cache.get(mode)
        if cached and cached[0] == revision:
            return cached[1]

        table = {
            binding.key_signature: binding
            for binding in self._registry.iter_bindings(mode)
        }
        self._cache[mode] = (revision, table)
        return table


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
]
