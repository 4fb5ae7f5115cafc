"""AST Parser data models.

Defines the structural view of a Java compilation unit that the
conversion pipeline consumes. These are pure data containers with
no parsing logic.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Annotation:
    """An annotation attached to a type or method declaration.

    ``arguments`` maps each element name to the raw source text of its
    value, e.g. ``{"modid": '"combathelper"'}``. A single unnamed
    argument (``@Foo("x")``) is stored under ``"value"``.
    """

    name: str  # "Mod", "SubscribeEvent", "net.minecraftforge.fml.common.Mod"
    arguments: Dict[str, str] = field(default_factory=dict)
    line: int = 0

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]


@dataclass
class MethodDeclaration:
    """A method declaration found anywhere in the compilation unit."""

    name: str
    parameter_types: List[str]  # Source text of each declared parameter type
    body: Optional[str]  # Raw body span including braces; None for abstract methods
    start_line: int
    end_line: int
    annotations: List[Annotation] = field(default_factory=list)
    parent_name: Optional[str] = None  # Enclosing type, if any


@dataclass
class TypeDeclaration:
    """A class, interface, enum or record declaration."""

    name: str
    start_line: int
    end_line: int
    annotations: List[Annotation] = field(default_factory=list)
    parent_name: Optional[str] = None  # For nested types: enclosing type


@dataclass
class ParseError:
    """An error encountered during parsing."""

    file_path: str
    line: int
    message: str
    severity: str = "warning"  # "warning" | "error"


@dataclass
class ParseResult:
    """Complete parse output for a single compilation unit.

    ``types`` and ``methods`` are both in document (pre-order) order.
    """

    file_path: str
    types: List[TypeDeclaration]
    methods: List[MethodDeclaration]
    errors: List[ParseError] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        """True when at least one error-severity problem was recorded."""
        return any(e.severity == "error" for e in self.errors)
