import pytest

from dependency_bundle import DependencyBundle, OverrideAttempted


def test_unbound_attribute_raises_attribute_error():
    deps = DependencyBundle()

    with pytest.raises(AttributeError, match="missing"):
        deps.missing  # noqa: B018


def test_hasattr_distinguishes_bound_and_unbound_names():
    deps = DependencyBundle(x=1)

    assert hasattr(deps, "x")
    assert not hasattr(deps, "y")


def test_attribute_assignment_registers_dependency():
    deps = DependencyBundle()

    deps.cache = {}

    assert deps.cache == {}
    assert "cache" in deps


def test_attribute_assignment_cannot_override():
    deps = DependencyBundle(x=1)

    with pytest.raises(OverrideAttempted, match="x"):
        deps.x = 2

    assert deps.x == 1


def test_attribute_assignment_cannot_replace_methods():
    deps = DependencyBundle()

    with pytest.raises(OverrideAttempted, match="verify_dependencies"):
        deps.verify_dependencies = lambda *names: True


def test_dependencies_cannot_be_deleted():
    deps = DependencyBundle(x=1)

    with pytest.raises(AttributeError):
        del deps.x

    assert deps.x == 1


def test_contains_reports_bindings_only():
    deps = DependencyBundle(x=1)

    assert "x" in deps
    assert "env" in deps
    assert "set" not in deps
    assert "y" not in deps


def test_dir_lists_bound_names():
    deps = DependencyBundle(x=1)

    names = dir(deps)

    assert "x" in names
    assert "stdout" in names
    assert "verify_dependencies" in names


def test_repr_lists_names_in_registration_order():
    deps = DependencyBundle(x=1)
    deps.set("y", 2)

    assert repr(deps) == "<DependencyBundle env, stdin, stdout, stderr, x, y>"
