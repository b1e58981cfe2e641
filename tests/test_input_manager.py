import pytest

from chunkken.input_manager import MAX_INPUT_QUEUE, InputManager
from chunkken.input_table import InputTable
from chunkken.move_combos import MoveComboTree
from chunkken.moves import MoveTable
from chunkken.records import ExecutingMove

INPUT_LINES = [
    "InputID,Name,BitIndex,BitMaskDec,BitMaskHex,BitMaskBin",
    "1,UP,0,1,0x01,00000001",
    "2,DOWN,1,2,0x02,00000010",
    "3,LEFT,2,4,0x04,00000100",
    "4,RIGHT,3,8,0x08,00001000",
    "5,LP,4,16,0x10,00010000",
    "6,RP,5,32,0x20,00100000",
    "7,LK,6,64,0x40,01000000",
    "8,RK,7,128,0x80,10000000",
]

MOVE_LINES = [
    "MoveID,CharID,Command,RelativeID,AttackType,Damage,Hits,HitLevel,"
    "StartUp,ActiveFrames,Recovery,OnBlock,OnHit,Notes",
    "100,1,lp,0,strike,5,1,high,10,2,8,1,8,jab",
    "101,1,rp,0,strike,8,1,high,12,2,9,0,6,cross",
    "102,1,lk,0,strike,9,1,mid,14,2,10,-2,5,kick",
    "103,1,f,0,move,0,0,none,1,1,1,0,0,step",
]

COMBO_LINES = [
    "ComboID,StepOrder,MoveID",
    "1,1,100",
    "1,2,101",
]

LP, RP, LK = 5, 6, 7
LEFT_ID, RIGHT_ID = 3, 4


@pytest.fixture
def manager():
    inputs = InputTable.from_lines(INPUT_LINES)
    moves = MoveTable.from_lines(MOVE_LINES, inputs)
    combos = MoveComboTree.from_lines(COMBO_LINES)
    return InputManager(inputs, moves, combos)


def test_queue_has_fixed_size(manager):
    assert len(manager.queue) == MAX_INPUT_QUEUE


def test_first_press_starts_moveset(manager):
    manager.push_pressed(1, LP, 1, True)
    moveset = []
    move = manager.extract_move(moveset)
    assert move.move_id == 100
    assert move.frame_index == 1
    assert moveset == [move]


def test_extraction_marks_event_used(manager):
    manager.push_pressed(1, LP, 1, True)
    manager.extract_move([])
    assert manager.queue[0].used is True


def test_press_accumulates_previous_frame(manager):
    manager.push_pressed(1, LP, 1, True)
    manager.push_pressed(1, RP, 2, True)
    assert manager.queue[1].bitmask == manager.queue[0].bitmask | manager.inputs.bitmask(RP)


def test_press_on_same_frame_merges(manager):
    manager.push_pressed(1, LP, 1, True)
    manager.push_pressed(1, RP, 1, True)
    assert manager.current == 1
    expected = manager.inputs.bitmask(LP) | manager.inputs.bitmask(RP)
    assert manager.queue[0].bitmask == expected


def test_follow_up_in_combo_is_appended(manager):
    moveset = []
    manager.push_pressed(1, LP, 1, True)
    manager.extract_move(moveset)
    manager.push_pressed(1, RP, 2, True)
    move = manager.extract_move(moveset)
    assert move.move_id == 101
    assert move.ignore is False
    assert [m.move_id for m in moveset] == [100, 101]


def test_follow_up_outside_combo_ends_it(manager):
    moveset = []
    manager.push_pressed(1, LP, 1, True)
    manager.extract_move(moveset)
    manager.push_pressed(1, LK, 2, True)
    move = manager.extract_move(moveset)
    assert move.move_id == 102
    assert move.ignore is True
    assert move.combo_done is True
    assert len(moveset) == 1
    assert moveset[-1].combo_done is True


def test_input_after_combo_done_is_ignored(manager):
    moveset = [ExecutingMove(move_id=100, frame_index=1, combo_done=True)]
    manager.push_pressed(1, RP, 2, True)
    move = manager.extract_move(moveset)
    assert move.ignore is True
    assert len(moveset) == 1


def test_late_follow_up_is_ignored(manager):
    moveset = []
    manager.push_pressed(1, LP, 1, True)
    manager.extract_move(moveset)
    manager.push_pressed(1, RP, 50, True)
    move = manager.extract_move(moveset)
    assert move.ignore is True
    assert move.combo_done is False
    assert len(moveset) == 1


def test_release_clears_button(manager):
    manager.push_pressed(1, LP, 1, True)
    manager.push_released(1, LP, 1, True)
    assert manager.queue[0].bitmask == 0
    moveset = []
    move = manager.extract_move(moveset)
    assert move.move_id == -1
    assert moveset == []


def test_release_without_press_raises(manager):
    with pytest.raises(LookupError):
        manager.push_released(1, LP, 5, True)


def test_right_side_player_swaps_left_for_right(manager):
    manager.push_pressed(1, LEFT_ID, 1, False)
    assert manager.queue[0].bitmask == manager.inputs.bitmask(RIGHT_ID)
    assert manager.extract_move([]).move_id == 103


def test_left_side_player_keeps_direction(manager):
    manager.push_pressed(1, LEFT_ID, 1, True)
    assert manager.queue[0].bitmask == manager.inputs.bitmask(LEFT_ID)
    assert manager.extract_move([]).move_id == -1


def test_unknown_move_in_moveset_raises(manager):
    manager.push_pressed(1, RP, 2, True)
    with pytest.raises(KeyError):
        manager.extract_move([ExecutingMove(move_id=999, frame_index=1)])


def test_ring_buffer_wraps(manager):
    for frame in range(1, MAX_INPUT_QUEUE + 3):
        manager.push_pressed(1, LP, frame, True)
    assert manager.current == 2
    assert manager.queue[1].frame_index == MAX_INPUT_QUEUE + 2