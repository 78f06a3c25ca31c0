"""Tests for SuspenseHooksGenerator."""

from graphql import parse

from suspenseql import FragmentDescriptor, PluginConfig, SuspenseHooksGenerator
from suspenseql.codegen.templates import CREATE_REPOSITORY_DECLARATION

WEATHER_OPTIONS = "Omit<QueryOptions<GetWeatherQueryVariables, GetWeatherQuery>, 'query'>"


class TestGenerateQueries:
    """Tests for query hooks."""

    def test_only_queries_get_hooks(self, weather_document) -> None:
        """Test the GetWeather + UpdateCity example."""
        generator = SuspenseHooksGenerator()

        output = generator.generate([weather_document])

        assert [b.hook_name for b in generator.bindings] == ["useGetWeatherSuspenseQuery"]
        assert output.content.count("export const use") == 1
        assert "useUpdateCitySuspenseMutation" not in output.content
        assert "client.mutate" not in output.content

    def test_mutation_document_is_still_emitted(self, weather_document) -> None:
        """Test that skipped operations keep their document constant."""
        output = SuspenseHooksGenerator().generate([weather_document])

        assert "export const UpdateCityDocument = gql`" in output.content

    def test_repository_wiring(self, weather_document) -> None:
        """Test the createRepository call of a query."""
        output = SuspenseHooksGenerator().generate([weather_document])

        assert (
            "const getWeatherSuspense = createRepository<GetWeatherQuery, "
            f"ApolloSuspenseArgs<{WEATHER_OPTIONS}>>(async (client: ApolloClient<object>, "
            f"options: {WEATHER_OPTIONS}) => {{"
        ) in output.content
        assert (
            "const { data } = await client.query<GetWeatherQuery, "
            "GetWeatherQueryVariables>({"
        ) in output.content
        assert "query: GetWeatherDocument," in output.content
        assert "...options," in output.content
        assert "return values(options?.variables || {}).join('-');" in output.content

    def test_accessor(self, weather_document) -> None:
        """Test the exported hook."""
        output = SuspenseHooksGenerator().generate([weather_document])

        assert (
            f"export const useGetWeatherSuspenseQuery = (options: {WEATHER_OPTIONS}) => {{"
        ) in output.content
        assert "const client = useApolloClient();" in output.content
        assert "return getWeatherSuspense.read(client, options);" in output.content
        assert "options ?? {}" not in output.content

    def test_doc_comment_lists_variables(self, weather_document) -> None:
        """Test the usage example in the hook's comment."""
        output = SuspenseHooksGenerator().generate([weather_document])

        assert " * useGetWeatherSuspenseQuery" in output.content
        assert " *     city: // value for 'city'" in output.content
        assert " *     country: // value for 'country'" in output.content

    def test_query_without_variables(self) -> None:
        """Test that the options bag becomes optional."""
        output = SuspenseHooksGenerator().generate(
            [parse("query GetCities { cities { name } }")]
        )

        assert (
            "export const useGetCitiesSuspenseQuery = (options?: Omit<QueryOptions<"
            "GetCitiesQueryVariables, GetCitiesQuery>, 'query'>) => {"
        ) in output.content
        assert " * const data = useGetCitiesSuspenseQuery();" in output.content
        assert "return getCitiesSuspense.read(client, options ?? {});" in output.content

    def test_anonymous_query(self) -> None:
        """Test that anonymous operations keep an empty name component."""
        output = SuspenseHooksGenerator().generate([parse("{ cities { name } }")])

        assert "export const Document = gql`" in output.content
        assert "export const useSuspenseQuery = " in output.content
        assert "const suspense = createRepository<Query," in output.content

    def test_inline_document(self, weather_document) -> None:
        """Test the gql tagged template."""
        output = SuspenseHooksGenerator().generate([weather_document])

        assert "export const GetWeatherDocument = gql`" in output.content
        assert "query GetWeather($city: String!, $country: String!) {" in output.content


class TestGenerateMutations:
    """Tests for opted-in mutation hooks."""

    def test_mutation_hook(self, weather_document) -> None:
        """Test the wiring of a mutation."""
        generator = SuspenseHooksGenerator(PluginConfig(emit_mutation_hooks=True))

        output = generator.generate([weather_document])

        assert [b.hook_name for b in generator.mutation_bindings] == [
            "useUpdateCitySuspenseMutation"
        ]
        assert (
            "client.mutate<UpdateCityMutation, UpdateCityMutationVariables>({"
            in output.content
        )
        assert "mutation: UpdateCityDocument," in output.content
        assert output.prepend[0] == (
            "import { useApolloClient, ApolloClient, QueryOptions, MutationOptions } "
            "from '@apollo/client';"
        )

    def test_subscriptions_are_skipped(self) -> None:
        """Test that subscriptions never get hooks."""
        generator = SuspenseHooksGenerator(PluginConfig(emit_mutation_hooks=True))

        output = generator.generate([parse("subscription OnCity { cityAdded { name } }")])

        assert generator.bindings == []
        assert "export const use" not in output.content


class TestPrepend:
    """Tests for imports and shared declarations."""

    def test_inline_mode_imports(self, weather_document) -> None:
        """Test the import lines of the default mode."""
        output = SuspenseHooksGenerator().generate([weather_document])

        assert output.prepend == [
            "import { useApolloClient, ApolloClient, QueryOptions } from '@apollo/client';",
            "import hash from 'object-hash';",
            "import gql from 'graphql-tag';",
            "",
            "type ApolloSuspenseArgs<TVariables extends {} = {}> = "
            "[ApolloClient<object>, TVariables];",
            CREATE_REPOSITORY_DECLARATION,
        ]

    def test_external_mode_imports(self, weather_document) -> None:
        """Test the namespace import of external documents."""
        config = PluginConfig(
            use_external_document=True,
            import_document_node_externally_from="./generated/graphql",
        )

        output = SuspenseHooksGenerator(config).generate([weather_document])

        assert "import * as Operations from './generated/graphql';" in output.prepend
        assert "import gql from 'graphql-tag';" not in output.prepend
        assert "query: Operations.GetWeatherDocument," in output.content
        assert "gql`" not in output.content

    def test_empty_documents(self) -> None:
        """Test a generation pass without operations."""
        output = SuspenseHooksGenerator().generate([])

        assert output.prepend == [
            "import { useApolloClient, ApolloClient, QueryOptions } from '@apollo/client';",
            "import hash from 'object-hash';",
            CREATE_REPOSITORY_DECLARATION,
        ]
        assert output.content == ""

    def test_custom_import_sources(self, weather_document) -> None:
        """Test overriding the client and gql modules."""
        config = PluginConfig(gql_import="@apollo/client", apollo_client_import="apollo")

        output = SuspenseHooksGenerator(config).generate([weather_document])

        assert output.prepend[0].endswith("from 'apollo';")
        assert "import gql from '@apollo/client';" in output.prepend

    def test_render_joins_prepend_and_content(self, weather_document) -> None:
        """Test the final file text."""
        output = SuspenseHooksGenerator().generate([weather_document])

        rendered = output.render()

        assert rendered.startswith("import { useApolloClient")
        assert rendered.endswith(output.content)


class TestFragments:
    """Tests for fragment documents."""

    def test_local_fragment_is_declared_and_included(self) -> None:
        """Test fragment constants and their interpolation."""
        document = parse(
            """
            fragment CityFields on City { name }
            query GetCities { cities { ...CityFields } }
            """
        )

        output = SuspenseHooksGenerator().generate([document])

        assert output.content.startswith("export const CityFieldsFragmentDoc = gql`")
        assert "${CityFieldsFragmentDoc}" in output.content

    def test_external_fragment_is_imported(self) -> None:
        """Test configured external fragments."""
        config = PluginConfig(
            external_fragments=[
                FragmentDescriptor(
                    name="CityFields",
                    on_type="City",
                    is_external=True,
                    import_from="./fragments",
                )
            ]
        )

        output = SuspenseHooksGenerator(config).generate(
            [parse("query GetCities { cities { ...CityFields } }")]
        )

        assert "import { CityFieldsFragmentDoc } from './fragments';" in output.prepend
        assert "export const CityFieldsFragmentDoc" not in output.content
        assert "${CityFieldsFragmentDoc}" in output.content

    def test_fragments_property(self) -> None:
        """Test that local fragments precede external ones."""
        config = PluginConfig(
            external_fragments=[{"name": "Remote", "onType": "City"}]
        )
        generator = SuspenseHooksGenerator(config)

        generator.generate([parse("fragment Local on City { name }")])

        assert [(f.name, f.is_external) for f in generator.fragments] == [
            ("Local", False),
            ("Remote", True),
        ]

    def test_generate_resets_previous_pass(self, weather_document) -> None:
        """Test that bindings belong to the last pass only."""
        generator = SuspenseHooksGenerator()
        generator.generate([weather_document])

        generator.generate([parse("query GetCities { cities { name } }")])

        assert [b.hook_name for b in generator.bindings] == ["useGetCitiesSuspenseQuery"]
