import pytest

from floatdsp.core.registry import (
    RegistryError,
    available_operations,
    get_operation,
    register_operation,
)
from floatdsp.ops import BUILTIN_OPERATIONS, register_builtin_operations


def test_builtin_operations_are_registered():
    register_builtin_operations()
    names = available_operations()
    for name, *_ in BUILTIN_OPERATIONS:
        assert name in names


def test_lookup_normalises_names():
    register_builtin_operations()
    spec = get_operation("  Average_Filter ")
    assert spec.name == "average_filter"
    assert spec.kind == "transform"
    assert spec.params == ("width",)
    assert spec.doc.startswith("Moving mean")


def test_unknown_operation_lists_available():
    register_builtin_operations()
    with pytest.raises(RegistryError) as exc:
        get_operation("fft")
    assert "Available operations" in str(exc.value)
    assert "median_filter" in str(exc.value)


def test_register_rejects_bad_entries():
    with pytest.raises(RegistryError):
        register_operation("  ", lambda a, dtype=None: a, "transform")
    with pytest.raises(RegistryError):
        register_operation("identity", lambda a, dtype=None: a, "mystery")


def test_register_custom_operation():
    def double(a, dtype=None):
        """Double every element."""
        return a * 2

    spec = register_operation("Double", double, "transform")
    assert get_operation("double") is spec
    assert spec.doc == "Double every element."
