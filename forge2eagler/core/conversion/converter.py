"""Forge mod → EaglerForge ModAPI script converter.

One ``convert`` call turns one Java compilation unit into formatted
script text: metadata calls, ``ModAPI.require`` lines, then one listener
registration per ``@SubscribeEvent`` method.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Optional, Set, Union

from ..ast_parser import parse_source
from ..config import ConverterSettings
from .events import EventTypeResolver
from .extractor import extract_event_handlers, extract_mod_metadata
from .formatter import format_script
from .mappings import DEFAULT_TABLES, MappingTables
from .modules import RequiredModuleDetector
from .renderer import render_listener, render_metadata, render_requires
from .rewriter import BodyRewriter

logger = logging.getLogger(__name__)


class ConversionError(ValueError):
    """The source unit could not be parsed; no output was produced."""

    def __init__(self, message: str, line: int = 0):
        super().__init__(message)
        self.line = line


class ForgeToEaglerConverter:
    """Converts Forge Java source units to ModAPI script.

    Required modules found by ``convert`` are kept on the instance when
    ``settings.accumulate_required_modules`` is set, so a second call
    also requires every module the first call detected. Call ``reset()``
    or disable the setting for per-call detection.
    """

    def __init__(
        self,
        settings: Optional[ConverterSettings] = None,
        tables: MappingTables = DEFAULT_TABLES,
    ):
        self.settings = settings or ConverterSettings()
        self._tables = tables
        self._resolver = EventTypeResolver(tables.direct_events)
        self._rewriter = BodyRewriter(tables, self.settings.qualified_name_order)
        self._detector = RequiredModuleDetector(tables.module_triggers)
        self._required_modules: Set[str] = set()

    @property
    def required_modules(self) -> FrozenSet[str]:
        """Modules accumulated by previous calls."""
        return frozenset(self._required_modules)

    def reset(self) -> None:
        self._required_modules.clear()

    def convert(self, source_text: str, file_path: Optional[str] = None) -> str:
        """Convert one compilation unit.

        Args:
            source_text: Java source of the unit
            file_path: Label used in error messages

        Returns:
            Formatted ModAPI script

        Raises:
            ConversionError: If the source does not parse
        """
        result = parse_source(source_text, file_path)
        if result.failed:
            error = next(e for e in result.errors if e.severity == "error")
            logger.error("Failed to parse %s: %s", result.file_path, error.message)
            raise ConversionError(f"Failed to parse Java source code: {error.message}", error.line)

        metadata = extract_mod_metadata(result)
        if metadata.is_empty:
            logger.debug("No @Mod metadata in %s", result.file_path)
        handlers = extract_event_handlers(result)

        detected = self._detector.detect(source_text)
        if self.settings.accumulate_required_modules:
            self._required_modules |= detected
            modules = frozenset(self._required_modules)
        else:
            modules = detected
        ordered_modules = self._detector.ordered(modules)

        sections = render_metadata(metadata)
        sections.append("")
        sections.extend(render_requires(ordered_modules))
        sections.append("")

        for handler in handlers:
            category = self._resolver.resolve(handler.event_type_name)
            body = self._rewriter.rewrite(handler.body, handler.method_name)
            logger.debug(
                "Handler %s(%s) at line %d → '%s'",
                handler.method_name,
                handler.event_type_name,
                handler.line,
                category,
            )
            sections.append(
                render_listener(category, body, handler.method_name, self.settings.guard_objects)
            )
            sections.append("")

        logger.info(
            "Converted %s: %d handler(s), modules=%s",
            result.file_path,
            len(handlers),
            ordered_modules,
        )
        return format_script("\n".join(sections))

    def convert_file(self, file_path: Union[str, Path]) -> str:
        """Read a UTF-8 Java file and convert it."""
        path = Path(file_path)
        source_text = path.read_text(encoding="utf-8")
        return self.convert(source_text, str(path))


def convert(source_text: str, settings: Optional[ConverterSettings] = None) -> str:
    """Convert with a fresh converter, so no modules carry over between calls."""
    return ForgeToEaglerConverter(settings).convert(source_text)
