"""Required ModAPI module detection."""

from typing import FrozenSet, Iterable, List, Mapping, Optional, Tuple

from .mappings import MODULE_TRIGGERS


class RequiredModuleDetector:
    """Finds the ModAPI modules a source unit needs.

    Detection is a plain substring scan over the whole, unmodified
    source: a trigger inside a comment or an unused field still counts.
    """

    def __init__(self, triggers: Optional[Mapping[str, Tuple[str, ...]]] = None):
        self._triggers = MODULE_TRIGGERS if triggers is None else triggers

    def detect(self, source_text: str) -> FrozenSet[str]:
        return frozenset(
            module
            for module, patterns in self._triggers.items()
            if any(pattern in source_text for pattern in patterns)
        )

    def ordered(self, modules: Iterable[str]) -> List[str]:
        """Return ``modules`` in trigger-table order."""
        wanted = set(modules)
        return [module for module in self._triggers if module in wanted]
