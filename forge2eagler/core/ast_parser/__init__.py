"""forge2eagler AST Parser: tree-sitter based Java parsing.

Public API:
    parse_source(source, file_path) → ParseResult
"""

from typing import Optional

from .models import Annotation, MethodDeclaration, ParseError, ParseResult, TypeDeclaration

__all__ = [
    "parse_source",
    "Annotation",
    "MethodDeclaration",
    "ParseError",
    "ParseResult",
    "TypeDeclaration",
]

# Lazy-loaded so importing the package does not build the grammar
_parser = None


def _get_parser():
    global _parser
    if _parser is None:
        from .java_parser import JavaParser
        _parser = JavaParser()
    return _parser


def parse_source(source_text: str, file_path: Optional[str] = None) -> ParseResult:
    """Parse Java source code held in a string.

    Args:
        source_text: Source code as string
        file_path: Label used in error messages (defaults to "<source>")

    Returns:
        ParseResult with type and method declarations
    """
    return _get_parser().parse_source(source_text, file_path or "<source>")
