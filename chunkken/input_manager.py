"""Per-character input buffer that turns button presses into moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence

from .input_table import LEFT, RIGHT, InputTable
from .move_combos import MoveComboTree
from .moves import MoveTable
from .records import ExecutingMove

MAX_INPUT_QUEUE = 60
_ATTACK_BITS = 0xF0


@dataclass
class InputEvent:
    """The buttons held during one frame."""

    char_id: int = 0
    bitmask: int = 0
    frame_index: int = 0
    left: bool = False
    used: bool = False
    ignored: bool = False


class InputManager:
    """A ring buffer of per-frame inputs for one character."""

    def __init__(
        self, inputs: InputTable, moves: MoveTable, combos: MoveComboTree
    ) -> None:
        self.inputs = inputs
        self.moves = moves
        self.combos = combos
        self.queue = [InputEvent() for _ in range(MAX_INPUT_QUEUE)]
        self.current = 0

    def _facing_bitmask(self, input_id: int, left: bool) -> int:
        bitmask = self.inputs.bitmask(input_id)
        if left:
            return bitmask
        left_bit = self.inputs.bitmask(self.inputs.index(LEFT))
        right_bit = self.inputs.bitmask(self.inputs.index(RIGHT))
        return right_bit if bitmask == left_bit else left_bit

    def _find(self, frame_index: int) -> int | None:
        return next(
            (i for i, event in enumerate(self.queue) if event.frame_index == frame_index),
            None,
        )

    def push_pressed(
        self, char_id: int, input_id: int, frame_index: int, left: bool
    ) -> None:
        """Record a button press; a player on the right has front and back swapped."""
        event = InputEvent(
            char_id=char_id,
            bitmask=self._facing_bitmask(input_id, left),
            frame_index=frame_index,
            left=left,
        )
        index = self._find(frame_index)
        if index is None:
            event.bitmask |= self.queue[(self.current - 1) % MAX_INPUT_QUEUE].bitmask
            self.queue[self.current] = event
            self.current = (self.current + 1) % MAX_INPUT_QUEUE
        else:
            self.queue[index].bitmask |= event.bitmask

    def push_released(
        self, char_id: int, input_id: int, frame_index: int, left: bool
    ) -> None:
        """Record a button release on a frame that already holds input."""
        bitmask = self._facing_bitmask(input_id, left)
        index = self._find(frame_index)
        if index is None:
            raise LookupError(f"no input recorded on frame {frame_index} to release")
        self.queue[index].bitmask &= ~bitmask & 0xFF

    def _latest_pair(self) -> tuple[InputEvent, InputEvent]:
        current_index = (self.current - 1) % MAX_INPUT_QUEUE
        previous_index = (current_index - 1) % MAX_INPUT_QUEUE
        return self.queue[current_index], self.queue[previous_index]

    def _extract_first(self) -> ExecutingMove:
        current, previous = self._latest_pair()
        current.used = True
        held = current.bitmask & previous.bitmask & _ATTACK_BITS
        move_id = self.moves.move_id(current.char_id, current.bitmask ^ held)
        return ExecutingMove(move_id=move_id, frame_index=current.frame_index)

    def _extract_follow_up(self, moveset: MutableSequence[ExecutingMove]) -> ExecutingMove:
        current, previous = self._latest_pair()
        current.used = True
        held = current.bitmask & previous.bitmask
        move_id = self.moves.move_id(current.char_id, current.bitmask ^ held)
        result = ExecutingMove(move_id=move_id, frame_index=current.frame_index)

        startup = 0
        for move in moveset:
            data = self.moves.move_data_by_id(move.move_id)
            if data is None:
                raise KeyError(f"unknown move id {move.move_id}")
            startup = data.startup

        late = current.frame_index - (moveset[0].frame_index + startup)
        if late > 0 or move_id == -1 or moveset[-1].combo_done:
            result.ignore = True
            return result

        if not self.combos.is_move_in_combo(moveset, move_id):
            result.ignore = True
            result.combo_done = True
        return result

    def extract_move(self, moveset: MutableSequence[ExecutingMove]) -> ExecutingMove:
        """Read the newest input as a move, appending it to ``moveset`` when it counts."""
        move = self._extract_follow_up(moveset) if moveset else self._extract_first()
        if move.move_id != -1 and not move.ignore:
            moveset.append(move)
        if move.combo_done:
            moveset[-1].combo_done = True
        return move