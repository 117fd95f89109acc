import pytest

from vim_core.keymaps import (
    DEFAULT_BINDINGS,
    ActionRef,
    Binding,
    KeySequence,
    KeymapConflictError,
    KeymapRegistry,
    load_default_keymaps,
)


def make_action(action_id: str = "core.test") -> ActionRef:
    return ActionRef(id=action_id, handler=lambda *args, **kwargs: None)


def make_binding(
    *,
    binding_id: str,
    mode: str = "normal",
    keys: tuple[str, ...] = ("g", "g"),
    action_id: str = "core.test",
) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=KeySequence.from_strings(*keys),
        action_id=action_id,
    )


def test_register_binding_success() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    binding = make_binding(binding_id="normal.gg")

    registry.register_binding(binding)

    assert list(registry.iter_bindings(mode="normal")) == [binding]
    assert registry.find("normal", "g g") is binding
    assert registry.revision() == 1


def test_register_binding_conflict_detection() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.gg"))

    with pytest.raises(KeymapConflictError) as excinfo:
        registry.register_binding(make_binding(binding_id="normal.gg.duplicate"))

    assert [b.id for b in excinfo.value.conflicts] == ["normal.gg"]


def test_same_keys_in_different_modes_do_not_conflict() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    registry.register_binding(make_binding(binding_id="normal.gg"))
    registry.register_binding(make_binding(binding_id="visual.gg", mode="visual"))

    assert registry.modes() == ("normal", "visual")


def test_binding_requires_registered_action() -> None:
    registry = KeymapRegistry()

    with pytest.raises(KeyError):
        registry.register_binding(make_binding(binding_id="normal.gg"))


def test_duplicate_action_and_binding_ids_raise() -> None:
    registry = KeymapRegistry()
    registry.register_action(make_action())
    with pytest.raises(ValueError):
        registry.register_action(make_action())

    registry.register_binding(make_binding(binding_id="normal.gg"))
    with pytest.raises(ValueError):
        registry.register_binding(make_binding(binding_id="normal.gg", keys=("x",)))


def test_model_validation() -> None:
    with pytest.raises(ValueError):
        KeySequence.from_strings()
    with pytest.raises(TypeError):
        ActionRef(id="core.bad", handler="not callable")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        make_binding(binding_id="")


def test_modifiers_are_normalized_into_tokens() -> None:
    sequence = KeySequence.from_strings("r")
    assert sequence.tokens == ("r",)

    from vim_core.keymaps import KeyStroke

    stroke = KeyStroke("r", modifiers=("shift", "ctrl", "CTRL"))
    assert stroke.token == "CTRL+SHIFT+r"


def test_load_default_keymaps_registers_every_mode() -> None:
    registry = load_default_keymaps(KeymapRegistry())

    assert registry.modes() == ("command", "insert", "normal", "visual")
    assert len(list(registry.iter_bindings())) == len(DEFAULT_BINDINGS)
    assert registry.find("normal", "d d") is not None
    assert registry.find("normal", "g g") is not None
    assert registry.find("insert", "ESC") is not None
    assert registry.find("command", "ENTER") is not None
