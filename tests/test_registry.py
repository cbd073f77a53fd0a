import pytest

from minish.shell.registry import COMMAND_REGISTRY, CommandRegistry, CommandResult, CommandSpec


def test_builtins_registered():
    import minish.shell.commands  # noqa: F401

    names = {spec.name for spec in COMMAND_REGISTRY.iter_commands()}
    assert names == {"cd", "echo", "type", "exec", "help"}


def test_decorator_registers_with_syntax():
    registry = CommandRegistry()

    @registry.command("hello", syntax="hello <name>", description="Say hello")
    def hello(shell, args):
        return f"hello {args[0]}\n"

    spec = registry.get("hello")
    assert spec is not None
    assert spec.syntax == "hello <name>"
    assert spec.description == "Say hello"
    assert "hello" in registry
    assert len(registry) == 1


def test_duplicate_names_rejected():
    registry = CommandRegistry()
    registry.register("x", lambda shell, args: None)
    with pytest.raises(ValueError):
        registry.register("x", lambda shell, args: None)


def test_lookup_is_case_sensitive():
    registry = CommandRegistry()
    registry.register("echo", lambda shell, args: None)
    assert registry.get("ECHO") is None


@pytest.mark.parametrize(
    "returned, expected",
    [
        (None, CommandResult()),
        ("text\n", CommandResult(stdout="text\n")),
        (CommandResult(stdout="x", exit_code=4), CommandResult(stdout="x", exit_code=4)),
    ],
)
def test_execute_normalizes_handler_results(returned, expected):
    spec = CommandSpec("demo", lambda shell, args: returned)
    assert spec.execute(None, []) == expected


def test_syntax_defaults_to_empty():
    spec = CommandSpec("demo", lambda shell, args: None)
    assert spec.syntax == ""
