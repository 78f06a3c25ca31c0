"""Shared TypeScript declarations prepended to generated files."""

from suspenseql.codegen.ts_builder import TypeAlias, TypeRef

# Key expression of the emitted `read`: "default" without arguments,
# otherwise the configured strategy applied to the spread arguments, or
# an object-hash of the argument list.
CACHE_KEY_EXPRESSION = (
    "!args.length ? 'default' : options?.toCacheKey ? options.toCacheKey(...args) : hash(args)"
)

# Runtime read-through cache shared by every generated hook. React
# suspense needs the in-flight promise to be thrown, so the emitted
# repository throws instead of returning a result object.
CREATE_REPOSITORY_DECLARATION = """interface RepositoryOptions<TArgs extends unknown[] = []> {
    toCacheKey?: (...args: Partial<TArgs>) => string;
}

export function createRepository<TReturn, TArgs extends unknown[] = []>(
    fetcher: (...args: TArgs) => Promise<TReturn>,
    options?: RepositoryOptions<TArgs>
) {
    let cache: Record<string, TReturn> = {};
    return {
        read: (...args: TArgs): TReturn => {
            const cacheKey = @CACHE_KEY@;
            if (cache[cacheKey] === undefined) throw fetcher(...args).then(value => (cache[cacheKey] = value));
            else return cache[cacheKey];
        }
    }
}
""".replace("@CACHE_KEY@", CACHE_KEY_EXPRESSION)

SUSPENSE_ARGS_TYPE = "ApolloSuspenseArgs"
CLIENT_TYPE = TypeRef("ApolloClient", ("object",))

# Key strategy emitted for every operation: drop the client, join the
# variable values with "-".
VARIABLES_KEY_STRATEGY = """(_, options) => {
    const { values } = Object;
    return values(options?.variables || {}).join('-');
}"""


def suspense_args_alias() -> TypeAlias:
    """``type ApolloSuspenseArgs<TVariables extends {} = {}> = [ApolloClient<object>, TVariables];``"""
    return TypeAlias(
        name=SUSPENSE_ARGS_TYPE,
        type_params=("TVariables extends {} = {}",),
        value=f"[{CLIENT_TYPE.render()}, TVariables]",
    )


def get_create_repository_declaration() -> str:
    """Get the TypeScript ``createRepository`` declaration.

    Returns:
        The declaration source.
    """
    return CREATE_REPOSITORY_DECLARATION
