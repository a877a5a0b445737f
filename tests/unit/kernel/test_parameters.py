"""Parameter declaration and per-record reading tests."""

import pytest

from apinodes.kernel.errors import ConfigurationError, MalformedPayloadError
from apinodes.kernel.executor.context import ExecutionContext
from apinodes.kernel.resolver.parameters import ParameterDeclaration, ParameterSet

PARAMETERS = ParameterSet(
    declarations=(
        ParameterDeclaration(name="operation", type="options", options=("search", "process"), default="search"),
        ParameterDeclaration(name="apiUrl", type="string", default="", show_for=("search",)),
        ParameterDeclaration(name="limit", type="number", default=5, show_for=("search",)),
        ParameterDeclaration(name="inputData", type="string", default="", show_for=("process",)),
        ParameterDeclaration(name="verbose", type="boolean", default=False),
    )
)


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestSelectApplicableFields:
    def test_search_fields(self) -> None:
        assert PARAMETERS.select_applicable_fields("search") == {"operation", "apiUrl", "limit", "verbose"}

    def test_process_fields(self) -> None:
        assert PARAMETERS.select_applicable_fields("process") == {"operation", "inputData", "verbose"}

    def test_unrestricted_fields_apply_without_operation(self) -> None:
        assert PARAMETERS.select_applicable_fields() == {"operation", "verbose"}


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestRead:
    def test_defaults_fill_missing_parameters(self) -> None:
        context = ExecutionContext(items=[{}])

        values = PARAMETERS.read(context, 0)

        assert values == {"operation": "search", "apiUrl": "", "limit": 5, "verbose": False}

    def test_per_record_expression(self) -> None:
        context = ExecutionContext(
            items=[{"text": "a"}, {"text": "b"}],
            parameters={"operation": "process", "inputData": lambda record: record.payload["text"]},
        )

        assert PARAMETERS.read(context, 1) == {"operation": "process", "inputData": "b", "verbose": False}

    def test_numbers_are_coerced(self) -> None:
        context = ExecutionContext(items=[{}], parameters={"limit": "12"})

        assert PARAMETERS.read(context, 0)["limit"] == 12

    def test_unparsable_number_raises(self) -> None:
        context = ExecutionContext(items=[{}], parameters={"limit": "lots"})

        with pytest.raises(MalformedPayloadError):
            PARAMETERS.read(context, 0)

    def test_booleans_are_coerced(self) -> None:
        context = ExecutionContext(items=[{}], parameters={"verbose": "true"})

        assert PARAMETERS.read(context, 0)["verbose"] is True

    def test_unknown_option_raises_configuration_error(self) -> None:
        context = ExecutionContext(items=[{}], parameters={"operation": "delete"})

        with pytest.raises(ConfigurationError):
            PARAMETERS.read(context, 0)


@pytest.mark.unit
@pytest.mark.P0
@pytest.mark.deterministic
class TestDeclaration:
    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValueError):
            ParameterSet(
                declarations=(
                    ParameterDeclaration(name="apiUrl", type="string"),
                    ParameterDeclaration(name="apiUrl", type="string"),
                )
            )

    def test_default_outside_options_rejected(self) -> None:
        with pytest.raises(ValueError):
            ParameterDeclaration(name="httpMethod", type="options", options=("GET", "POST"), default="PUT")

    def test_declarations_are_frozen(self) -> None:
        declaration = PARAMETERS.get("limit")

        with pytest.raises(ValueError):
            declaration.default = 10
