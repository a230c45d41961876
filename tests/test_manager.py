import pytest

from prsm.errors import RegistrationConflict, UnknownScript
from prsm.manager import DEFAULT_NAME, ScriptManager
from prsm.script import Script, fail, script


def x():
    return None


def z(a):
    fail(a + 3)


def _manager(name=None):
    return ScriptManager([(1, script("x", x)), (2, script("z", z, 0))], name=name)


def test_run_script_success_and_failure_text():
    sm = _manager()
    assert sm.run_script(1) is None
    assert sm.run_script(2) == "3"
    assert len(sm) == 2


def test_default_and_explicit_name():
    assert _manager().name == DEFAULT_NAME == "ScriptManager"
    named = ScriptManager([(1, script("Test x", x))], name="TestManager")
    assert named.name == "TestManager"
    header = named.render().splitlines()[0]
    assert "TestManager" in header and DEFAULT_NAME not in header


def test_render_sorted_and_footer_width():
    sm = ScriptManager([(10, "ten", x), (2, "two", x), (7, "seven", x)])
    lines = sm.render().splitlines()
    assert lines[0] == "========== ScriptManager =========="
    assert lines[1:-1] == ["[2] two", "[7] seven", "[10] ten"]
    assert lines[-1] == "=" * len(lines[0])
    assert str(sm) == sm.render()
    assert not sm.render().endswith("\n")


def test_empty_manager_renders_header_and_footer():
    lines = ScriptManager().render().splitlines()
    assert len(lines) == 2
    assert len(lines[0]) == len(lines[1])


def test_mapping_input_and_iteration_order():
    sm = ScriptManager({3: Script("c", x), 1: Script("a", x)})
    assert sm.ids == (1, 3)
    assert [sc.description for _, sc in sm] == ["a", "c"]
    assert 3 in sm and 2 not in sm
    assert sm.get(2) is None


def test_duplicate_id_rejected():
    with pytest.raises(RegistrationConflict) as exc:
        ScriptManager([(1, "a", x), (1, "b", x)])
    assert exc.value.script_id == 1


@pytest.mark.parametrize("bad", [0, -1, True, "1", 1.0])
def test_invalid_ids_rejected(bad):
    with pytest.raises(ValueError):
        ScriptManager([(bad, "a", x)])


def test_unknown_id_raises():
    sm = _manager()
    with pytest.raises(UnknownScript) as exc:
        sm.run_script(9)
    assert exc.value.script_id == 9
    assert exc.value.available == (1, 2)
    with pytest.raises(LookupError):
        sm[9]


def test_read_only_after_construction():
    sm = _manager()
    with pytest.raises(TypeError):
        sm.scripts[3] = script("y", x)
    with pytest.raises(AttributeError):
        sm.name = "Other"


def test_same_id_runs_twice():
    seen = []
    sm = ScriptManager([(1, script("tick", seen.append, "tick"))])
    assert sm.run_script(1) is None
    assert sm.run_script(1) is None
    assert seen == ["tick", "tick"]


def test_exception_failure_text():
    def broken():
        raise RuntimeError("lint failed: 2 errors")

    sm = ScriptManager([(1, "Lint", broken)])
    assert sm.run_script(1) == "lint failed: 2 errors"


def test_unhashable_id_is_unknown():
    sm = _manager()
    assert [1] not in sm
    assert sm.get([1]) is None
    with pytest.raises(UnknownScript) as exc:
        sm.run_script([1])
    assert exc.value.script_id == [1]


def test_name_is_stored_as_text():
    sm = ScriptManager([(1, "x", x)], name=42)
    assert sm.name == "42"
    assert sm.render().splitlines()[0] == "========== 42 =========="
    assert ScriptManager([(1, "x", x)], name="").name == DEFAULT_NAME
