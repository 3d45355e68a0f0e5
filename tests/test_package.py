"""Top-level package surface."""

import convkit


def test_version():
    assert convkit.__version__ == "1.0.0"


def test_all_names_resolve():
    for name in convkit.__all__:
        assert hasattr(convkit, name), name


def test_reexported_operations():
    assert convkit.convert_length(1000, "m", "km") == 1
    assert convkit.to_hex(255) == "FF"
    assert convkit.to_kebab_case("Hello World!") == "hello-world"
    assert issubclass(convkit.ConversionUnsupported, convkit.ConvKitException)
