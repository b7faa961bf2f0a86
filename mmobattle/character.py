"""Combatants: the base character, monsters and the player."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from .hud import PopUpHUDElement
from .model import Model
from .vec3 import distance_between_vecs

ATTACK_COOLDOWN = 100
DAMAGE_COLOR = (255, 0, 0, 255)


@dataclass(frozen=True)
class Skill:
    """A player skill."""


class Character:
    """A combatant with hit points, mana, attack and defense."""

    def __init__(
        self,
        hp: int,
        mp: int,
        attack: int,
        defense: int,
        attack_range: int,
        sprite_file_name: str,
        popup_font: Any,
        x: int = 0,
        y: int = 0,
        z: int = 0,
        speed: int = 5,
        xp: int = 0,
    ) -> None:
        self.max_hp = hp
        self.current_hp = hp
        self.max_mp = mp
        self.current_mp = mp
        self.base_attack = attack
        self.base_defense = defense
        self.attack_range = attack_range
        self.sprite_file_name = sprite_file_name
        self.speed = speed
        self.xp = xp
        self.attacking = False
        self.attack_time = 0
        self.model = Model(x, y, z)
        origin = self.model.origin
        self.damage_popup = PopUpHUDElement(
            popup_font, "", "", (origin.x, origin.y), DAMAGE_COLOR
        )

    @property
    def hp(self) -> int:
        return self.current_hp

    @property
    def mp(self) -> int:
        return self.current_mp

    @property
    def attack(self) -> int:
        return self.base_attack

    @property
    def defense(self) -> int:
        return self.base_defense

    def attack_enemy(self, target: Character) -> None:
        """Hit the target if both are alive, it is in range and no cooldown runs."""
        if not (self.current_hp and target.hp):
            return
        self.attacking = True
        distance = distance_between_vecs(self.model.origin, target.model.origin)
        if distance.x > self.attack_range or distance.y > self.attack_range:
            return
        if self.attack_time:
            return
        target.take_damage(max(self.attack - target.defense, 0))
        target_origin = target.model.origin
        target.damage_popup.set_position((target_origin.x, target_origin.y))
        target.damage_popup.show()
        self.attack_time = ATTACK_COOLDOWN
        self.attacking = False

    def take_damage(self, damage: int) -> None:
        """Lose hit points, clamped to the range from zero to maximum."""
        self.damage_popup.set_value(str(damage))
        self.current_hp = min(max(self.current_hp - damage, 0), self.max_hp)

    def update(self, frame: int, screen: Any) -> None:
        """Advance the cooldown and refresh the model and damage pop-up."""
        if self.attack_time:
            self.attack_time -= 1
        if self.current_hp:
            self.model.update(frame, screen)
        self.damage_popup.update(frame, "", screen)


class Monster(Character):
    """A character that attacks the player once they come close enough."""

    def __init__(
        self,
        hp: int,
        mp: int,
        attack: int,
        defense: int,
        attack_range: int,
        sprite_file_name: str,
        popup_font: Any,
        xp: int,
        aggro_range: int,
        x: int,
        y: int,
        z: int,
        speed: int = 3,
    ) -> None:
        super().__init__(
            hp, mp, attack, defense, attack_range, sprite_file_name, popup_font,
            x, y, z, speed, xp,
        )
        self.aggro_range = aggro_range

    def check_player_proximity(self, player: Character) -> None:
        """Attack the player when within aggro range on every axis, else stop."""
        if not self.current_hp:
            return
        distance = distance_between_vecs(self.model.position, player.model.position)
        if (
            distance.x < self.aggro_range
            and distance.y < self.aggro_range
            and distance.z < self.aggro_range
        ):
            self.attack_enemy(player)
        else:
            self.model.stop()


class Player(Character):
    """The player's character, with attributes that boost its stats."""

    def __init__(
        self,
        hp: int,
        mp: int,
        attack: int,
        defense: int,
        attack_range: int,
        strength: int,
        vitality: int,
        intelligence: int,
        sprite_file_name: str,
        popup_font: Any,
        skills: Iterable[Skill] = (),
    ) -> None:
        super().__init__(
            hp, mp, attack, defense, attack_range, sprite_file_name, popup_font
        )
        self.strength = strength
        self.vitality = vitality
        self.intelligence = intelligence
        self.skills = list(skills)

    @property
    def attack(self) -> int:
        return self.base_attack + self.strength

    @property
    def defense(self) -> int:
        return self.base_defense + self.vitality

    def calculate_attributes(self) -> None:
        """Raise maximum hit points and mana from vitality and intelligence."""
        self.max_hp += self.vitality * 10
        self.max_mp += self.intelligence * 5

    def level_up(self, str_plus: int, vit_plus: int, int_plus: int) -> None:
        """Set new attributes and rescale current hit points and mana."""
        self.strength = str_plus
        self.vitality = vit_plus
        self.intelligence = int_plus
        hp_fraction = self.current_hp // self.max_hp
        mp_fraction = self.current_mp // self.max_mp
        self.calculate_attributes()
        self.current_hp = self.max_hp * hp_fraction
        self.current_mp = self.max_mp * mp_fraction