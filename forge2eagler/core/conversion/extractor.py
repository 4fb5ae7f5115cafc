"""Extraction of mod metadata and event handlers from a parsed unit."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..ast_parser.models import Annotation, ParseResult

logger = logging.getLogger(__name__)

MOD_ANNOTATION = "Mod"
SUBSCRIBER_ANNOTATION = "SubscribeEvent"

# @Mod element name -> ModMetadata field
_METADATA_KEYS = {
    "modid": "mod_id",
    "version": "version",
    "name": "name",
    "description": "description",
}


@dataclass(frozen=True)
class ModMetadata:
    """Identity attributes declared by the @Mod annotation."""
    mod_id: Optional[str] = None
    version: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not any((self.mod_id, self.version, self.name, self.description))


@dataclass(frozen=True)
class EventHandler:
    """A @SubscribeEvent method, captured as written."""
    method_name: str
    event_type_name: str  # First parameter's declared type, verbatim
    body: str  # Body source including the braces
    line: int = 0


def _is_annotation(annotation: Annotation, simple_name: str) -> bool:
    # `Mod` and `net.minecraftforge.fml.common.Mod` both count; `Mod.EventHandler` does not
    return annotation.name == simple_name or annotation.name.endswith("." + simple_name)


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        return value[1:-1]
    return value


def extract_mod_metadata(parse_result: ParseResult) -> ModMetadata:
    """Read @Mod attributes from every type declaration.

    Types are visited in document order and each field keeps the last
    value seen, so a later @Mod overrides an earlier one field by field.
    """
    values = {}
    for type_decl in parse_result.types:
        for annotation in type_decl.annotations:
            if not _is_annotation(annotation, MOD_ANNOTATION):
                continue
            logger.debug("@Mod on %s at line %d", type_decl.name, type_decl.start_line)
            for key, raw in annotation.arguments.items():
                field_name = _METADATA_KEYS.get(key)
                if field_name:
                    values[field_name] = _strip_quotes(raw)
    return ModMetadata(**values)


def extract_event_handlers(parse_result: ParseResult) -> List[EventHandler]:
    """Collect @SubscribeEvent methods in document order.

    Methods without parameters or without a body cannot be converted and
    are skipped.
    """
    handlers: List[EventHandler] = []
    for method in parse_result.methods:
        if not any(_is_annotation(a, SUBSCRIBER_ANNOTATION) for a in method.annotations):
            continue
        if not method.parameter_types:
            logger.debug("Skipping subscriber %s at line %d: no parameters", method.name, method.start_line)
            continue
        if method.body is None:
            logger.debug("Skipping subscriber %s at line %d: no body", method.name, method.start_line)
            continue
        handlers.append(
            EventHandler(
                method_name=method.name,
                event_type_name=method.parameter_types[0],
                body=method.body,
                line=method.start_line,
            )
        )
    return handlers
