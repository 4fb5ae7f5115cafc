"""Handler body rewriting: Forge Java idioms → ModAPI script.

The rewrite runs in four stages, each a chain over the previous stage's
output:

1. fully-qualified class names (mapping table)
2. method names, as ``.name(`` → ``.target(``
3. special cases and framework idioms (``rules.SPECIAL_CASE_RULES``,
   ``rules.FRAMEWORK_RULES``)
4. generic Java → JavaScript syntax (``rules.SYNTAX_RULES``)

and finally strips the braces that delimit the method body.
"""

import logging
from typing import List, Tuple

from .mappings import DEFAULT_TABLES, MappingTables
from .rules import (
    FRAMEWORK_RULES,
    OUTER_BRACES,
    SPECIAL_CASE_RULES,
    SYNTAX_RULES,
    apply_rules,
)

logger = logging.getLogger(__name__)


class BodyRewriter:
    """Applies the ordered rewrite battery to handler bodies.

    Args:
        tables: Mapping tables to substitute from
        qualified_name_order: ``"table"`` substitutes class names in table
            order, where ``net.minecraft.entity.player.EntityPlayer`` is
            replaced inside ``...EntityPlayerMP`` before the longer entry
            is reached. ``"longest_first"`` substitutes longer names first.
    """

    def __init__(self, tables: MappingTables = DEFAULT_TABLES, qualified_name_order: str = "table"):
        if qualified_name_order not in ("table", "longest_first"):
            raise ValueError(f"Unknown qualified_name_order: {qualified_name_order}")
        self._tables = tables
        self._qualified_names = self._order_qualified_names(tables, qualified_name_order)
        self._method_names: List[Tuple[str, str]] = [
            (f".{source}(", f".{target}(") for source, target in tables.method_names.items()
        ]

    @staticmethod
    def _order_qualified_names(tables: MappingTables, order: str) -> List[Tuple[str, str]]:
        pairs = list(tables.qualified_names.items())
        if order == "longest_first":
            # sorted() is stable: equal lengths keep table order
            pairs = sorted(pairs, key=lambda pair: len(pair[0]), reverse=True)
        return pairs

    def substitute_qualified_names(self, text: str) -> str:
        for source, target in self._qualified_names:
            text = text.replace(source, target)
        return text

    def substitute_method_names(self, text: str) -> str:
        for source, target in self._method_names:
            text = text.replace(source, target)
        return text

    def rewrite(self, body: str, handler_name: str) -> str:
        """Convert one handler body to script.

        Args:
            body: Raw method body, braces included
            handler_name: Method name, for logging only

        Returns:
            Single-line script body without the enclosing braces
        """
        text = self.substitute_qualified_names(body)
        text = self.substitute_method_names(text)
        text = apply_rules(text, SPECIAL_CASE_RULES)
        text = apply_rules(text, FRAMEWORK_RULES)
        text = apply_rules(text, SYNTAX_RULES).strip()
        text = OUTER_BRACES.apply(text).strip()

        logger.debug("Rewrote handler %s (%d → %d chars)", handler_name, len(body), len(text))
        return text
