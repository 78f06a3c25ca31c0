"""TypeScript code building for generated suspense hooks."""

from suspenseql.codegen.doc_comment import build_hook_doc_comment
from suspenseql.codegen.templates import (
    CREATE_REPOSITORY_DECLARATION,
    get_create_repository_declaration,
    suspense_args_alias,
)
from suspenseql.codegen.ts_builder import (
    ArrowFunction,
    Call,
    Const,
    Import,
    ObjectLiteral,
    Parameter,
    SourceFile,
    TypeAlias,
    TypeRef,
    omit,
)

__all__ = [
    "ArrowFunction",
    "Call",
    "Const",
    "Import",
    "ObjectLiteral",
    "Parameter",
    "SourceFile",
    "TypeAlias",
    "TypeRef",
    "omit",
    "build_hook_doc_comment",
    "CREATE_REPOSITORY_DECLARATION",
    "get_create_repository_declaration",
    "suspense_args_alias",
]
