"""Structured builder for TypeScript source.

Generated code is described with small typed declarations (imports,
type aliases, generic types, arrow functions, const declarations)
that render themselves, instead of concatenating ad hoc strings.
"""

from dataclasses import dataclass, field

INDENT = "    "


def indent(text: str, level: int = 1) -> str:
    """Indent every non-empty line of ``text`` by ``level`` steps."""
    prefix = INDENT * level
    return "\n".join(f"{prefix}{line}" if line else line for line in text.split("\n"))


@dataclass(frozen=True)
class TypeRef:
    """A (possibly generic) type reference such as ``QueryOptions<A, B>``."""

    name: str
    args: tuple["TypeRef | str", ...] = ()

    def render(self) -> str:
        if not self.args:
            return self.name
        rendered = ", ".join(_render_type(arg) for arg in self.args)
        return f"{self.name}<{rendered}>"

    def __str__(self) -> str:
        return self.render()


def omit(base: TypeRef | str, *keys: str) -> TypeRef:
    """Build ``Omit<base, 'key' | ...>``."""
    union = " | ".join(f"'{key}'" for key in keys)
    return TypeRef("Omit", (base, union))


@dataclass(frozen=True)
class Import:
    """An ES module import declaration."""

    module: str
    default: str | None = None
    named: tuple[str, ...] = ()
    namespace: str | None = None

    def render(self) -> str:
        clauses: list[str] = []
        if self.default:
            clauses.append(self.default)
        if self.namespace:
            clauses.append(f"* as {self.namespace}")
        if self.named:
            clauses.append("{ " + ", ".join(self.named) + " }")
        return f"import {', '.join(clauses)} from '{self.module}';"


@dataclass(frozen=True)
class TypeAlias:
    """``type Name<Params> = Value;``"""

    name: str
    value: TypeRef | str
    type_params: tuple[str, ...] = ()
    exported: bool = False

    def render(self) -> str:
        params = f"<{', '.join(self.type_params)}>" if self.type_params else ""
        export = "export " if self.exported else ""
        return f"{export}type {self.name}{params} = {_render_type(self.value)};"


@dataclass(frozen=True)
class Parameter:
    """A function parameter with an optional type annotation."""

    name: str
    type: TypeRef | str | None = None

    def render(self) -> str:
        if self.type is None:
            return self.name
        return f"{self.name}: {_render_type(self.type)}"


@dataclass(frozen=True)
class ArrowFunction:
    """``async (a: A, b: B) => { ... }``"""

    params: tuple[Parameter, ...] = ()
    body: tuple[str, ...] = ()
    is_async: bool = False

    def render(self) -> str:
        prefix = "async " if self.is_async else ""
        params = ", ".join(param.render() for param in self.params)
        if not self.body:
            return f"{prefix}({params}) => {{}}"
        body = indent("\n".join(self.body))
        return f"{prefix}({params}) => {{\n{body}\n}}"


@dataclass(frozen=True)
class ObjectLiteral:
    """``{ key: value, ... }`` with already-rendered values."""

    entries: tuple[tuple[str, str], ...] = ()
    spreads: tuple[str, ...] = ()

    def render(self) -> str:
        lines = [f"{key}: {value}," for key, value in self.entries]
        lines.extend(f"...{spread}," for spread in self.spreads)
        if not lines:
            return "{}"
        return "{\n" + indent("\n".join(lines)) + "\n}"


@dataclass(frozen=True)
class Call:
    """``callee<TypeArgs>(arg, ...)`` with already-rendered arguments."""

    callee: str
    args: tuple[str, ...] = ()
    type_args: tuple[TypeRef | str, ...] = ()

    def render(self) -> str:
        type_args = ""
        if self.type_args:
            type_args = "<" + ", ".join(_render_type(arg) for arg in self.type_args) + ">"
        return f"{self.callee}{type_args}({', '.join(self.args)})"


@dataclass(frozen=True)
class Const:
    """``export const name = value;`` with an optional leading comment."""

    name: str
    value: str
    exported: bool = False
    comment: str | None = None
    terminate: bool = True

    def render(self) -> str:
        export = "export " if self.exported else ""
        end = ";" if self.terminate else ""
        declaration = f"{export}const {self.name} = {self.value}{end}"
        if self.comment:
            return f"{self.comment}\n{declaration}"
        return declaration


@dataclass
class SourceFile:
    """An ordered collection of rendered blocks."""

    blocks: list[str] = field(default_factory=list)

    def add(self, *declarations: "Renderable | str") -> "SourceFile":
        for declaration in declarations:
            self.blocks.append(
                declaration if isinstance(declaration, str) else declaration.render()
            )
        return self

    def render(self, separator: str = "\n\n") -> str:
        return separator.join(block for block in self.blocks if block)


Renderable = TypeRef | Import | TypeAlias | ArrowFunction | ObjectLiteral | Call | Const


def _render_type(value: TypeRef | str) -> str:
    return value if isinstance(value, str) else value.render()
