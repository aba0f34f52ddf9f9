"""Input action definitions and the default key bindings."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass

_HOTBAR_KEYS = 9


class ActionKind(enum.Enum):
    """Kinds of high-level player actions."""

    MOVE_FORWARD = "move_forward"
    MOVE_BACKWARD = "move_backward"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    JUMP = "jump"
    INTERACT = "interact"
    HOTBAR_SLOT = "hotbar_slot"


@dataclass(frozen=True)
class InputAction:
    """A high-level action; hotbar actions carry their slot number."""

    kind: ActionKind
    slot: int | None = None

    def __post_init__(self) -> None:
        if self.kind is ActionKind.HOTBAR_SLOT:
            if self.slot is None or not 0 <= self.slot <= 255:
                raise ValueError("hotbar slot must be between 0 and 255")
        elif self.slot is not None:
            raise ValueError(f"{self.kind.value} takes no slot")

    @classmethod
    def hotbar_slot(cls, slot: int) -> InputAction:
        return cls(ActionKind.HOTBAR_SLOT, slot)


@dataclass(frozen=True)
class InputBinding:
    """Binding of an action to a named key."""

    action: InputAction
    key: str


class InputMap:
    """Static mapping from keys to actions."""

    def __init__(self, bindings: Iterable[InputBinding]) -> None:
        self.bindings: tuple[InputBinding, ...] = tuple(bindings)

    def contains_action(self, action: InputAction) -> bool:
        return any(binding.action == action for binding in self.bindings)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InputMap):
            return NotImplemented
        return self.bindings == other.bindings

    def __repr__(self) -> str:
        return f"InputMap(bindings={self.bindings!r})"


def default_input_map() -> InputMap:
    """Return the prototype key bindings: WASD, Space, E and 1-9 for the hotbar."""
    movement = [
        InputBinding(InputAction(ActionKind.MOVE_FORWARD), "W"),
        InputBinding(InputAction(ActionKind.MOVE_BACKWARD), "S"),
        InputBinding(InputAction(ActionKind.MOVE_LEFT), "A"),
        InputBinding(InputAction(ActionKind.MOVE_RIGHT), "D"),
        InputBinding(InputAction(ActionKind.JUMP), "Space"),
        InputBinding(InputAction(ActionKind.INTERACT), "E"),
    ]
    hotbar = [
        InputBinding(InputAction.hotbar_slot(slot), str(slot + 1)) for slot in range(_HOTBAR_KEYS)
    ]
    return InputMap(movement + hotbar)