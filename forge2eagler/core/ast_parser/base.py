"""Base interface for tree-sitter backed parsers.

Shared parsing logic (tree construction, syntax error detection)
lives here; language-specific extraction is delegated.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import tree_sitter

from .models import MethodDeclaration, ParseError, ParseResult, TypeDeclaration

logger = logging.getLogger(__name__)


class BaseLanguageParser(ABC):
    """Abstract base for tree-sitter parsers.

    Subclasses implement:
    - get_tree_sitter_language(): returns tree-sitter Language object
    - extract_types(): walks AST tree and extracts TypeDeclaration objects
    - extract_methods(): walks AST tree and extracts MethodDeclaration objects
    """

    @abstractmethod
    def get_tree_sitter_language(self) -> tree_sitter.Language:
        """Return the tree-sitter Language object for this language."""
        ...

    @abstractmethod
    def extract_types(self, tree: tree_sitter.Tree, source: bytes) -> List[TypeDeclaration]:
        """Extract type declarations, nested ones included, in document order."""
        ...

    @abstractmethod
    def extract_methods(self, tree: tree_sitter.Tree, source: bytes) -> List[MethodDeclaration]:
        """Extract every method declaration in document order."""
        ...

    def parse_source(self, source_text: str, file_path: str) -> ParseResult:
        """Parse source code string into a ParseResult.

        Args:
            source_text: Source code as string
            file_path: Path or label used in error messages

        Returns:
            ParseResult with extracted declarations. A tree containing
            syntax errors is reported with an error-severity ParseError;
            declarations are still extracted on a best-effort basis.
        """
        errors: List[ParseError] = []
        source_bytes = source_text.encode("utf-8")

        parser = tree_sitter.Parser(self.get_tree_sitter_language())
        tree = parser.parse(source_bytes)

        if tree.root_node.has_error:
            bad = self._first_error_node(tree.root_node)
            line = bad.start_point.row + 1 if bad is not None else 0
            errors.append(
                ParseError(
                    file_path=file_path,
                    line=line,
                    message=f"Syntax error near line {line}",
                    severity="error",
                )
            )
            logger.debug("tree-sitter reported syntax errors in %s (line %d)", file_path, line)

        types = self.extract_types(tree, source_bytes)
        methods = self.extract_methods(tree, source_bytes)

        return ParseResult(
            file_path=file_path,
            types=types,
            methods=methods,
            errors=errors,
        )

    @staticmethod
    def _first_error_node(node: tree_sitter.Node) -> Optional[tree_sitter.Node]:
        """Depth-first search for the first ERROR or MISSING node."""
        if node.type == "ERROR" or node.is_missing:
            return node
        for child in node.children:
            if child.has_error or child.is_missing:
                found = BaseLanguageParser._first_error_node(child)
                if found is not None:
                    return found
        return None

    @staticmethod
    def _text(node: tree_sitter.Node, source: bytes) -> str:
        return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")
