"""Java AST parser using tree-sitter.

Walks the tree-sitter AST to extract type declarations, method
declarations and their annotations from a Java compilation unit.
"""

import logging
from typing import Dict, List, Optional

import tree_sitter
import tree_sitter_java

from .base import BaseLanguageParser
from .models import Annotation, MethodDeclaration, TypeDeclaration

logger = logging.getLogger(__name__)

_JAVA_LANGUAGE = tree_sitter.Language(tree_sitter_java.language())

_TYPE_NODES = (
    "class_declaration",
    "interface_declaration",
    "enum_declaration",
    "record_declaration",
)

_ANNOTATION_NODES = ("marker_annotation", "annotation")


class JavaParser(BaseLanguageParser):
    """tree-sitter based Java parser.

    Extracts:
    - Class, interface, enum and record declarations (nested included)
    - Method declarations anywhere in the tree, anonymous classes included
    - Annotations on both, with their element/value pairs
    """

    def get_tree_sitter_language(self) -> tree_sitter.Language:
        return _JAVA_LANGUAGE

    def extract_types(self, tree: tree_sitter.Tree, source: bytes) -> List[TypeDeclaration]:
        types: List[TypeDeclaration] = []
        for node, parent in self._walk(tree.root_node, source):
            if node.type not in _TYPE_NODES:
                continue
            name = self._get_child_text(node, "name", source)
            if not name:
                continue
            types.append(
                TypeDeclaration(
                    name=name,
                    start_line=node.start_point.row + 1,
                    end_line=node.end_point.row + 1,
                    annotations=self._extract_annotations(node, source),
                    parent_name=parent,
                )
            )
        return types

    def extract_methods(self, tree: tree_sitter.Tree, source: bytes) -> List[MethodDeclaration]:
        methods: List[MethodDeclaration] = []
        for node, parent in self._walk(tree.root_node, source):
            if node.type != "method_declaration":
                continue
            name = self._get_child_text(node, "name", source)
            if not name:
                continue
            body_node = node.child_by_field_name("body")
            methods.append(
                MethodDeclaration(
                    name=name,
                    parameter_types=self._extract_parameter_types(node, source),
                    body=self._text(body_node, source) if body_node is not None else None,
                    start_line=node.start_point.row + 1,
                    end_line=node.end_point.row + 1,
                    annotations=self._extract_annotations(node, source),
                    parent_name=parent,
                )
            )
        return methods

    # =========================================================================
    # Helpers
    # =========================================================================

    def _walk(self, root: tree_sitter.Node, source: bytes):
        """Yield ``(node, enclosing_type_name)`` pairs in pre-order.

        Iterative so deeply nested sources cannot exhaust the recursion limit.
        """
        stack = [(root, None)]
        while stack:
            node, parent = stack.pop()
            yield node, parent

            child_parent = parent
            if node.type in _TYPE_NODES:
                child_parent = self._get_child_text(node, "name", source) or parent
            for child in reversed(node.children):
                stack.append((child, child_parent))

    @staticmethod
    def _get_child_text(node: tree_sitter.Node, field_name: str, source: bytes) -> Optional[str]:
        child = node.child_by_field_name(field_name)
        if child:
            return source[child.start_byte:child.end_byte].decode("utf-8", errors="replace")
        return None

    def _extract_parameter_types(self, node: tree_sitter.Node, source: bytes) -> List[str]:
        """Return the declared type text of each formal parameter, in order."""
        params = node.child_by_field_name("parameters")
        if params is None:
            return []

        types = []
        for child in params.named_children:
            if child.type == "formal_parameter":
                type_node = child.child_by_field_name("type")
                if type_node is not None:
                    types.append(self._text(type_node, source))
            elif child.type == "spread_parameter":
                # Varargs: `String... args` has no `type` field
                for sub in child.named_children:
                    if sub.type != "modifiers":
                        types.append(self._text(sub, source))
                        break
        return types

    def _extract_annotations(self, node: tree_sitter.Node, source: bytes) -> List[Annotation]:
        """Extract annotations from the declaration's modifiers."""
        annotations = []
        for child in node.children:
            if child.type != "modifiers":
                continue
            for mod_child in child.children:
                if mod_child.type in _ANNOTATION_NODES:
                    annotations.append(self._build_annotation(mod_child, source))
        return annotations

    def _build_annotation(self, node: tree_sitter.Node, source: bytes) -> Annotation:
        name = self._get_child_text(node, "name", source) or ""
        arguments: Dict[str, str] = {}

        arg_list = node.child_by_field_name("arguments")
        if arg_list is not None:
            for arg in arg_list.named_children:
                if arg.type == "element_value_pair":
                    key = self._get_child_text(arg, "key", source)
                    value = arg.child_by_field_name("value")
                    if key and value is not None:
                        arguments[key] = self._text(value, source).strip()
                elif arg.type not in ("line_comment", "block_comment"):
                    arguments["value"] = self._text(arg, source).strip()

        return Annotation(name=name, arguments=arguments, line=node.start_point.row + 1)
