"""Forge → EaglerForge conversion pipeline.

Public API:
    convert(source_text) → str
    ForgeToEaglerConverter(settings).convert(source_text) → str
"""

from .converter import ConversionError, ForgeToEaglerConverter, convert
from .events import EVENT_PREDICATES, EventTypeResolver
from .extractor import EventHandler, ModMetadata, extract_event_handlers, extract_mod_metadata
from .formatter import format_script
from .mappings import DEFAULT_TABLES, MappingTables
from .modules import RequiredModuleDetector
from .rewriter import BodyRewriter
from .rules import RULESET_VERSION, RewriteRule

__all__ = [
    "BodyRewriter",
    "ConversionError",
    "DEFAULT_TABLES",
    "EVENT_PREDICATES",
    "EventHandler",
    "EventTypeResolver",
    "ForgeToEaglerConverter",
    "MappingTables",
    "ModMetadata",
    "RULESET_VERSION",
    "RequiredModuleDetector",
    "RewriteRule",
    "convert",
    "extract_event_handlers",
    "extract_mod_metadata",
    "format_script",
]
