"""Every module imports cleanly on the supported interpreters."""
import importlib
import pytest

MODULES = [
    "shared", "shared.types", "shared.geometry", "shared.svg",
    "frame.constants", "frame.solver", "frame.layout", "frame.configs", "frame.gen_frame",
    "jig.constants", "jig.jig", "jig.gen_jig",
    "gen_all",
]


@pytest.mark.parametrize("name", MODULES)
def test_module_imports(name):
    assert importlib.import_module(name) is not None
