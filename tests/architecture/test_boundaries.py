from pytest_archon import archrule


def test_primitives_isolation() -> None:
    """
    Primitives layer is the lowest level.
    It must not import from validatables, validation, or configuration.
    """
    (
        archrule("primitives_isolation")
        .match("fieldcheck.primitives*")
        .should_not_import("fieldcheck.validatables*")
        .should_not_import("fieldcheck.validation*")
        .should_not_import("fieldcheck.configuration")
        .check("fieldcheck")
    )


def test_configuration_independence() -> None:
    """
    Configuration only depends on primitives.
    """
    (
        archrule("configuration_independence")
        .match("fieldcheck.configuration")
        .should_not_import("fieldcheck.constraints*")
        .should_not_import("fieldcheck.validatables*")
        .should_not_import("fieldcheck.validation*")
        .check("fieldcheck")
    )


def test_constraints_layering() -> None:
    """
    Constraints are evaluated by validators, never the other way around.
    """
    (
        archrule("constraints_layering")
        .match("fieldcheck.constraints*")
        .should_not_import("fieldcheck.validation*")
        .check("fieldcheck")
    )


def test_validatables_layering() -> None:
    """
    Validatables compose validators by duck typing only.
    """
    (
        archrule("validatables_layering")
        .match("fieldcheck.validatables*")
        .should_not_import("fieldcheck.validation*")
        .check("fieldcheck")
    )


def test_builders_use_public_surface() -> None:
    """
    Predicate builders go through ``constrain``; they must not reach into
    validators or the registry directly.
    """
    (
        archrule("builders_public_surface")
        .match("fieldcheck.constraints.builders*")
        .should_not_import("fieldcheck.validation*")
        .should_not_import("fieldcheck.constraints.registry")
        .check("fieldcheck", only_direct_imports=True)
    )
