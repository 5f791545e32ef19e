"""Documentation model shared by loaders, templates and processors."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FunctionDoc:
    """A documented function or augmentation method."""

    name: str
    arguments: Tuple[str, ...] = ()
    documentation: str = ""
    varargs: bool = False
    local: bool = False
    line: int = 0

    @property
    def signature(self) -> str:
        args = list(self.arguments)
        if self.varargs and args:
            args[-1] = f"{args[-1]}..."
        return f"{self.name}({', '.join(args)})"


@dataclass(frozen=True)
class StructDoc:
    """A documented struct and its members."""

    name: str
    members: Tuple[str, ...] = ()
    documentation: str = ""
    line: int = 0


@dataclass(frozen=True)
class UnionDoc:
    """A documented union and its values."""

    name: str
    values: Tuple[str, ...] = ()
    documentation: str = ""
    line: int = 0


@dataclass(frozen=True)
class AugmentationDoc:
    """Functions attached to an existing type."""

    target: str
    functions: Tuple[FunctionDoc, ...] = ()
    documentation: str = ""
    line: int = 0


@dataclass(frozen=True)
class ModuleDocumentation:
    """Public surface of one module, consumed read-only during rendering."""

    module_name: str
    documentation: str = ""
    imports: Tuple[str, ...] = ()
    functions: Tuple[FunctionDoc, ...] = ()
    structs: Tuple[StructDoc, ...] = ()
    unions: Tuple[UnionDoc, ...] = ()
    augmentations: Tuple[AugmentationDoc, ...] = ()
    module_state: Tuple[str, ...] = ()

    @property
    def public_functions(self) -> Tuple[FunctionDoc, ...]:
        """Functions visible outside the module, ordered by name."""
        return tuple(sorted((fn for fn in self.functions if not fn.local), key=lambda fn: fn.name))

    @property
    def summary(self) -> str:
        """First paragraph of the module documentation."""
        text = self.documentation.strip()
        if not text:
            return ""
        return text.split("\n\n", 1)[0].replace("\n", " ").strip()
