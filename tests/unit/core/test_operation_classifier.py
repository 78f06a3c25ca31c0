"""Tests for OperationClassifier."""

import pytest
from graphql import parse

from suspenseql import DocumentReader, OperationClassifier, OperationKind, PluginConfig


def read_operation(source: str):
    """Parse and read the first operation of ``source``."""
    return DocumentReader().read_operations(parse(source))[0]


class TestShouldGenerate:
    """Tests for operation selection."""

    def test_queries_are_generated(self) -> None:
        """Test that queries always get a hook."""
        operation = read_operation("query GetCities { cities { name } }")

        assert OperationClassifier().should_generate(operation) is True

    def test_mutations_are_skipped_by_default(self) -> None:
        """Test that mutation-only operations get no hook."""
        operation = read_operation("mutation UpdateCity { updateCity(name: \"x\") { name } }")

        assert OperationClassifier().should_generate(operation) is False
        assert OperationClassifier().classify(operation) is None

    def test_mutations_opt_in(self) -> None:
        """Test emit_mutation_hooks."""
        operation = read_operation("mutation UpdateCity { updateCity(name: \"x\") { name } }")
        classifier = OperationClassifier(PluginConfig(emit_mutation_hooks=True))

        assert classifier.should_generate(operation) is True

    @pytest.mark.parametrize("emit_mutation_hooks", [False, True])
    def test_subscriptions_are_never_generated(self, emit_mutation_hooks: bool) -> None:
        """Test that subscriptions are always skipped."""
        operation = read_operation("subscription OnCity { cityAdded { name } }")
        classifier = OperationClassifier(
            PluginConfig(emit_mutation_hooks=emit_mutation_hooks)
        )

        assert classifier.classify(operation) is None


class TestClassify:
    """Tests for derived names."""

    def test_query_plan(self, weather_document) -> None:
        """Test every name derived for GetWeather."""
        operation = DocumentReader().read_operations(weather_document)[0]

        plan = OperationClassifier().classify(operation)

        assert plan.operation_name == "GetWeatherQuery"
        assert plan.base_name == "GetWeatherSuspenseQuery"
        assert plan.hook_name == "useGetWeatherSuspenseQuery"
        assert plan.repository_name == "getWeatherSuspense"
        assert plan.client_action == "query"
        assert plan.document_keyword == "query"
        assert plan.document_variable == "GetWeatherDocument"
        assert plan.result_type == "GetWeatherQuery"
        assert plan.variables_type == "GetWeatherQueryVariables"
        assert plan.options_type.render() == (
            "Omit<QueryOptions<GetWeatherQueryVariables, GetWeatherQuery>, 'query'>"
        )

    def test_mutation_plan(self, weather_document) -> None:
        """Test names derived for an opted-in mutation."""
        operation = DocumentReader().read_operations(weather_document)[1]
        classifier = OperationClassifier(PluginConfig(emit_mutation_hooks=True))

        plan = classifier.classify(operation)

        assert plan.hook_name == "useUpdateCitySuspenseMutation"
        assert plan.repository_name == "updateCitySuspense"
        assert plan.client_action == "mutate"
        assert plan.is_mutation is True
        assert plan.options_type.render() == (
            "Omit<MutationOptions<UpdateCityMutationVariables, UpdateCityMutation>, "
            "'mutation'>"
        )

    def test_external_document_reference(self, weather_document) -> None:
        """Test the external document namespace."""
        operation = DocumentReader().read_operations(weather_document)[0]
        classifier = OperationClassifier(PluginConfig(use_external_document=True))

        plan = classifier.classify(operation)

        assert plan.document_variable == "Operations.GetWeatherDocument"

    def test_anonymous_query(self) -> None:
        """Test that an empty name leaves an empty name component."""
        plan = OperationClassifier().classify(read_operation("{ cities { name } }"))

        assert plan.hook_name == "useSuspenseQuery"
        assert plan.repository_name == "suspense"
        assert plan.document_variable == "Document"

    def test_lower_case_name_is_converted(self) -> None:
        """Test pascal-casing of camelCase operation names."""
        plan = OperationClassifier().classify(
            read_operation("query getCities { cities { name } }")
        )

        assert plan.hook_name == "useGetCitiesSuspenseQuery"

    def test_binding(self, weather_document) -> None:
        """Test the binding record of a plan."""
        operation = DocumentReader().read_operations(weather_document)[0]

        binding = OperationClassifier().classify(operation).to_binding()

        assert binding.name == "GetWeatherQuery"
        assert binding.action == "query"
        assert binding.hook_name == "useGetWeatherSuspenseQuery"
        assert binding.kind is OperationKind.QUERY
