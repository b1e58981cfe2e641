"""Character, combo and hit-effect tables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import partial
from typing import Iterable

from .csvutil import atoi, data_rows, read_lines, split_fields
from .records import CharacterData, ComboData, ComboDetail, HitEffect

_CHARACTER_COLUMNS = 7
_COMBO_COLUMNS = 6
_COMBO_DETAIL_COLUMNS = 5
_HIT_EFFECT_COLUMNS = 8
_SEPARATOR = "-------------------------------------------------"

_comma_fields = partial(split_fields, sep=",")


def parse_notation(text: str) -> list[int]:
    """Read a ``|``-separated list of move ids."""
    return [atoi(token) for token in split_fields(text, "|")]


@dataclass
class CharacterTable:
    """Playable characters by id."""

    characters: dict[int, CharacterData] = field(default_factory=dict)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "CharacterTable":
        """Build the table from CSV lines; the first line is a header."""
        table = cls()
        for fields in data_rows(lines, _comma_fields):
            if len(fields) != _CHARACTER_COLUMNS:
                continue
            character = CharacterData(
                char_id=atoi(fields[0]),
                char_name=fields[1],
                title=fields[2],
                hp=atoi(fields[3]),
                base_speed=atoi(fields[4]),
                wakeup_speed=atoi(fields[5]),
            )
            table.characters[character.char_id] = character
        return table

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "CharacterTable":
        return cls.from_lines(read_lines(path))

    def get(self, char_id: int) -> CharacterData | None:
        """Character by id; None when absent."""
        return self.characters.get(char_id)


@dataclass
class ComboTable:
    """Combos by id, each with its notation and steps."""

    combos: dict[int, ComboData] = field(default_factory=dict)

    @classmethod
    def from_lines(
        cls, combo_lines: Iterable[str], detail_lines: Iterable[str]
    ) -> "ComboTable":
        """Build the table from the combo and combo-detail CSV lines."""
        table = cls()
        for fields in data_rows(combo_lines, _comma_fields):
            if len(fields) != _COMBO_COLUMNS:
                continue
            combo = ComboData(
                combo_id=atoi(fields[0]),
                char_id=atoi(fields[1]),
                combo_name=fields[2],
                notation=parse_notation(fields[3]),
                estimated_damage=atoi(fields[4]),
            )
            table.combos[combo.combo_id] = combo
        for fields in data_rows(detail_lines, _comma_fields):
            if len(fields) != _COMBO_DETAIL_COLUMNS:
                continue
            detail = ComboDetail(
                combo_id=atoi(fields[0]),
                step_order=atoi(fields[1]),
                move_id=atoi(fields[2]),
                dash_event=fields[3] == "TRUE",
                tail_spin_event=fields[4] == "TRUE",
            )
            combo = table.combos.setdefault(
                detail.combo_id, ComboData(combo_id=detail.combo_id)
            )
            combo.details.append(detail)
        return table

    @classmethod
    def from_files(
        cls,
        combo_path: str | os.PathLike[str],
        detail_path: str | os.PathLike[str],
    ) -> "ComboTable":
        return cls.from_lines(read_lines(combo_path), read_lines(detail_path))

    def get(self, combo_id: int) -> ComboData | None:
        """Combo by id; None when absent."""
        return self.combos.get(combo_id)

    def describe(self) -> list[str]:
        """Summary lines for every combo, ordered by combo id."""
        lines = []
        for combo_id in sorted(self.combos):
            combo = self.combos[combo_id]
            lines.append(
                f"ComboID: {combo.combo_id}, CharID: {combo.char_id}, "
                f"ComboName: {combo.combo_name}, "
                f"EstimatedDamage: {combo.estimated_damage}"
            )
            lines.append("Notation: " + ",".join(str(n) for n in combo.notation))
            for detail in combo.details:
                lines.append(
                    f"  [Detail] StepOrder: {detail.step_order}, "
                    f"MoveID: {detail.move_id}, DashEvent: {detail.dash_event}, "
                    f"TailSpinEvent: {detail.tail_spin_event}"
                )
            lines.append(_SEPARATOR)
        return lines


@dataclass
class HitEffectTable:
    """Hit effects by id, with the effect each move triggers."""

    effects: dict[int, HitEffect] = field(default_factory=dict)
    by_move: dict[int, int] = field(default_factory=dict)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "HitEffectTable":
        """Build the table from CSV lines; the first line is a header."""
        table = cls()
        for fields in data_rows(lines, _comma_fields):
            if len(fields) != _HIT_EFFECT_COLUMNS:
                continue
            effect = HitEffect(
                hit_effect_id=atoi(fields[0]),
                move_id=atoi(fields[1]),
                condition=fields[2].upper(),
                extra_damage=atoi(fields[3]),
                launch=atoi(fields[4]),
                stun_frames=atoi(fields[5]),
                hit_reaction=fields[6].upper(),
            )
            table.effects[effect.hit_effect_id] = effect
            table.by_move[effect.move_id] = effect.hit_effect_id
        return table

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> "HitEffectTable":
        return cls.from_lines(read_lines(path))

    def get(self, hit_effect_id: int) -> HitEffect | None:
        """Hit effect by id; None when absent."""
        return self.effects.get(hit_effect_id)

    def hit_effect_for_move(self, move_id: int) -> int:
        """Id of the hit effect a move triggers; 0 when it has none."""
        return self.by_move.get(move_id, 0)