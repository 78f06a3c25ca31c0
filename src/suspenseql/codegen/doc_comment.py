"""JSDoc comments for generated hooks."""

from collections.abc import Sequence

APOLLO_CLIENT_DOCS = "https://www.apollographql.com/docs/react/api/core/#ApolloClient"

_FENCE = "```"


def build_hook_doc_comment(
    hook_name: str,
    document_keyword: str,
    client_action: str,
    variable_names: Sequence[str],
) -> str:
    """Render the JSDoc block placed above a generated hook.

    Args:
        hook_name: The exported hook, e.g. ``useGetWeatherSuspenseQuery``.
        document_keyword: ``query`` or ``mutation``.
        client_action: The client method, ``query`` or ``mutate``.
        variable_names: Declared variables, used for the usage example.

    Returns:
        The comment, starting with ``/**`` and ending with ``*/``.
    """
    lines = [
        "/**",
        f" * {hook_name}",
        " *",
        f" * Use this hook to execute a {document_keyword} for use in React suspense.",
        " * Please use an error boundary to catch any errors.",
        " *",
        " * @param options options that will be passed into the "
        f"{document_keyword}, supported options are listed on: "
        f"{APOLLO_CLIENT_DOCS}.{client_action}",
        " *",
        " * @example",
        f" * {_FENCE}typescript",
        *_example_lines(hook_name, variable_names),
        f" * {_FENCE}",
        " */",
    ]
    return "\n".join(lines)


def _example_lines(hook_name: str, variable_names: Sequence[str]) -> list[str]:
    if not variable_names:
        return [f" * const data = {hook_name}();"]
    return [
        f" * const data = {hook_name}({{",
        " *   variables: {",
        *(f" *     {name}: // value for '{name}'" for name in variable_names),
        " *   },",
        " * });",
    ]
