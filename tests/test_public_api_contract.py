import inspect

import diffkit


def test_public_api_symbol_list_is_explicit_and_stable() -> None:
    assert diffkit.__all__ == [
        "__version__",
        "Shape",
        "ReflectedNode",
        "DiffOptions",
        "AssertionResult",
        "DiffError",
        "ShapeMismatchError",
        "DiffAssertionError",
        "tagged_union",
        "canonicalize",
        "reflect",
        "diff",
        "diff_unequal",
        "dump_diff",
        "assert_values",
        "assert_no_diff",
    ]
    for name in diffkit.__all__:
        assert hasattr(diffkit, name)


def test_public_api_function_signatures() -> None:
    expected_parameter_order = {
        "diff": ("expected", "received", "options"),
        "diff_unequal": ("expected", "received", "options"),
        "dump_diff": ("expected", "received", "options", "stream"),
        "assert_values": ("expected", "received", "options"),
        "assert_no_diff": ("expected", "received", "options", "message"),
    }

    for name, parameters in expected_parameter_order.items():
        signature = inspect.signature(getattr(diffkit, name))
        assert tuple(signature.parameters) == parameters
        for parameter_name in parameters[2:]:
            parameter = signature.parameters[parameter_name]
            assert parameter.kind is inspect.Parameter.KEYWORD_ONLY
            assert parameter.default is None


def test_public_api_round_trip_usage() -> None:
    assert diffkit.diff([1, 2], [1, 2]) == []
    assert diffkit.diff({"k": 1}, {"k": 2}) == ["Child key k:\n|\tReceived: 2\n|\tExpected: 1\n\n"]
    assert diffkit.reflect({"k": 1}).shape == "key_value_map"
    assert diffkit.assert_values("a", "a").passed is True
    assert issubclass(diffkit.ShapeMismatchError, diffkit.DiffError)
