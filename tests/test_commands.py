import pytest

from gator.commands import Command, CommandNotFoundError, Commands


def test_run_calls_registered_handler_with_state_and_command():
    calls = []
    cmds = Commands()
    cmds.register("greet", lambda state, cmd: calls.append((state, cmd)))
    cmd = Command("greet", ["a", "b"])
    cmds.run("the-state", cmd)
    assert calls == [("the-state", cmd)]


def test_run_returns_handler_result():
    cmds = Commands()
    cmds.register("echo", lambda state, cmd: cmd.args)
    assert cmds.run(None, Command("echo", ["x"])) == ["x"]


def test_unknown_command_raises():
    cmds = Commands()
    with pytest.raises(CommandNotFoundError, match="command not found"):
        cmds.run(None, Command("missing"))


def test_error_message_is_plain():
    cmds = Commands()
    with pytest.raises(CommandNotFoundError) as info:
        cmds.run(None, Command("missing"))
    assert str(info.value) == "command not found"


def test_handler_errors_propagate():
    def boom(state, cmd):
        raise ValueError("bad")

    cmds = Commands()
    cmds.register("boom", boom)
    with pytest.raises(ValueError, match="bad"):
        cmds.run(None, Command("boom"))


def test_register_replaces_existing_handler():
    cmds = Commands()
    cmds.register("x", lambda s, c: 1)
    cmds.register("x", lambda s, c: 2)
    assert cmds.run(None, Command("x")) == 2
    assert len(cmds) == 1


def test_contains_and_iter():
    cmds = Commands()
    cmds.register("a", lambda s, c: None)
    cmds.register("b", lambda s, c: None)
    assert "a" in cmds
    assert "c" not in cmds
    assert sorted(cmds) == ["a", "b"]


def test_command_default_args_empty():
    assert Command("x").args == []