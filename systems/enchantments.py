# systems/enchantments.py
"""
Enchantment types: a fixed table of item enchantments with fast lookups.

Design:
- Each enchantment is an EnchantmentType with:
    key, id, name, aliases
- `id` mirrors the game's own enchantment ids. The ids are not contiguous
  (0-7, 16-22, 33-35, 48-51, 61-62) and must stay exactly as they are.
- Aliases are what a user types ("sharp", "fireprotection", ...). They are
  matched case-insensitively and must be unique across the whole table.
- The process-wide registry is built once, when this module is imported,
  and is read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from engine.error_handler import DataIntegrityError, logger


class EnchantmentID(IntEnum):
    """Numeric enchantment ids as used by the game."""
    PROTECTION_ENVIRONMENTAL = 0
    PROTECTION_FIRE = 1
    PROTECTION_FALL = 2
    PROTECTION_EXPLOSIONS = 3
    PROTECTION_PROJECTILE = 4
    OXYGEN = 5
    WATER_WORKER = 6
    THORNS = 7
    DAMAGE_ALL = 16
    DAMAGE_UNDEAD = 17
    DAMAGE_ARTHROPODS = 18
    KNOCKBACK = 19
    FIRE_ASPECT = 20
    LOOT_BONUS_MOBS = 21
    DIG_SPEED = 22
    SILK_TOUCH = 33
    DURABILITY = 34
    LOOT_BONUS_BLOCKS = 35
    ARROW_DAMAGE = 48
    ARROW_KNOCKBACK = 49
    ARROW_FIRE = 50
    ARROW_INFINITE = 51
    LUCK = 61
    LURE = 62


@dataclass(frozen=True)
class EnchantmentType:
    """
    One enchantment.

    key:
        Constant name, e.g. "DAMAGE_ALL".
    id:
        Game enchantment id.
    name:
        User-friendly display name.
    aliases:
        Lookup keys, in declaration order.
    """
    key: str
    id: int
    name: str
    aliases: Tuple[str, ...]

    @property
    def display_name(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


def _define(enchant_id: EnchantmentID, name: str, *aliases: str) -> EnchantmentType:
    return EnchantmentType(key=enchant_id.name, id=int(enchant_id), name=name, aliases=aliases)


# --- Enchantment table ------------------------------------------------------
# Append new entries at the end. Alias spellings are kept as-is
# ("explotion..." included), callers depend on them.

ENCHANTMENTS: Tuple[EnchantmentType, ...] = (
    # Armor
    _define(EnchantmentID.PROTECTION_ENVIRONMENTAL, "Protection", "protection"),
    _define(EnchantmentID.PROTECTION_FIRE, "Fire protection", "fireprotection", "flameprotection"),
    _define(EnchantmentID.PROTECTION_FALL, "Feather falling", "featherfalling", "fallprotection", "fallingprotection"),
    _define(EnchantmentID.PROTECTION_EXPLOSIONS, "Blast protection",
            "explotionprotection", "explotionsprotection", "blastprotection"),
    _define(EnchantmentID.PROTECTION_PROJECTILE, "Projectile protection", "projectileprotection"),
    _define(EnchantmentID.OXYGEN, "Respiration", "respiration", "oxygen", "breathing"),
    _define(EnchantmentID.WATER_WORKER, "Aqua affinity", "waterworker", "aquaaffinity", "watermine"),
    _define(EnchantmentID.THORNS, "Thorns", "thorns", "highcrit", "thorn", "highercrit"),

    # Melee weapons
    _define(EnchantmentID.DAMAGE_ALL, "Sharpness", "alldamage", "sharpness", "sharp"),
    _define(EnchantmentID.DAMAGE_UNDEAD, "Smite", "smite", "damageundead", "undeaddamage"),
    _define(EnchantmentID.DAMAGE_ARTHROPODS, "Bane of Arthropods", "baneofarthropods", "baneofarthropod", "arthropod"),
    _define(EnchantmentID.KNOCKBACK, "Knockback", "knockback"),
    _define(EnchantmentID.FIRE_ASPECT, "Fire aspect", "fireaspect", "fire", "meleefire", "meleeflame"),
    _define(EnchantmentID.LOOT_BONUS_MOBS, "Looting", "looting"),

    # Tools
    _define(EnchantmentID.DIG_SPEED, "Efficiency", "efficiency", "digspeed", "minespeed"),
    _define(EnchantmentID.SILK_TOUCH, "Silk touch", "silktouch", "softtouch"),
    _define(EnchantmentID.DURABILITY, "Unbreaking", "durability", "unbreaking"),
    _define(EnchantmentID.LOOT_BONUS_BLOCKS, "Fortune", "fortune", "lootbonus"),

    # Bows
    _define(EnchantmentID.ARROW_DAMAGE, "Power", "power", "arrowdamage", "arrowpower"),
    _define(EnchantmentID.ARROW_KNOCKBACK, "Punch", "punch", "arrowpunch", "arrowknockback"),
    _define(EnchantmentID.ARROW_FIRE, "Flame", "firearrow", "flame", "flamearrow"),
    _define(EnchantmentID.ARROW_INFINITE, "Infinity",
            "infinity", "infinite", "unlimited", "infinitearrows", "unlimitedarrows"),

    # Fishing rods
    _define(EnchantmentID.LUCK, "Luck of the sea", "luck", "luckofthesea", "luckofsea", "rodluck"),
    _define(EnchantmentID.LURE, "Lure", "lure", "rodlure"),
)


# --- Registry ---------------------------------------------------------------


class EnchantmentRegistry:
    """
    Read-only index over a sequence of enchantment types.

    Both lookup maps are built once in the constructor. If two records
    claim the same id or alias, the later one wins and the collision is
    logged and kept in `issues`; with strict=True it raises
    DataIntegrityError instead.
    """

    def __init__(self, records: Iterable[EnchantmentType], strict: bool = False) -> None:
        self._records: Tuple[EnchantmentType, ...] = tuple(records)
        self._issues: List[str] = []

        by_id: Dict[int, EnchantmentType] = {}
        by_alias: Dict[str, EnchantmentType] = {}

        for record in self._records:
            if not record.aliases:
                self._flag(f"Enchantment {record.key} ({record.id}) has no aliases", strict)

            previous = by_id.get(record.id)
            if previous is not None:
                self._flag(
                    f"Enchantment id {record.id} claimed by both {previous.key} and {record.key}",
                    strict,
                )
            by_id[record.id] = record

            for alias in record.aliases:
                alias_key = alias.lower()
                owner = by_alias.get(alias_key)
                if owner is not None and owner is not record:
                    self._flag(
                        f"Alias '{alias_key}' claimed by both {owner.key} and {record.key}",
                        strict,
                    )
                by_alias[alias_key] = record

        self._by_id: Mapping[int, EnchantmentType] = MappingProxyType(by_id)
        self._by_alias: Mapping[str, EnchantmentType] = MappingProxyType(by_alias)

        logger.debug(
            f"Enchantment registry built: {len(self._by_id)} ids, "
            f"{len(self._by_alias)} aliases, {len(self._issues)} issues"
        )

    def _flag(self, message: str, strict: bool) -> None:
        if strict:
            raise DataIntegrityError(message, user_message="Enchantment table is inconsistent.")
        logger.warning(message)
        self._issues.append(message)

    @property
    def by_id(self) -> Mapping[int, EnchantmentType]:
        return self._by_id

    @property
    def by_alias(self) -> Mapping[str, EnchantmentType]:
        return self._by_alias

    @property
    def issues(self) -> Tuple[str, ...]:
        return tuple(self._issues)

    def from_id(self, enchant_id: int) -> Optional[EnchantmentType]:
        """Return the enchantment with this id, or None."""
        return self._by_id.get(enchant_id)

    def lookup(self, alias: str) -> Optional[EnchantmentType]:
        """Return the enchantment with this alias (any case), or None."""
        return self._by_alias.get(alias.lower())

    def all(self) -> Tuple[EnchantmentType, ...]:
        return self._records

    def validate(self) -> List[str]:
        """Integrity problems found while building; empty when the table is clean."""
        return list(self._issues)

    def __iter__(self) -> Iterator[EnchantmentType]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record: object) -> bool:
        return record in self._records


# Global registry instance, built once at import time.
_global_registry = EnchantmentRegistry(ENCHANTMENTS)


def get_registry() -> EnchantmentRegistry:
    """Get the global enchantment registry."""
    return _global_registry


def from_id(enchant_id: int) -> Optional[EnchantmentType]:
    return _global_registry.from_id(enchant_id)


def lookup(alias: str) -> Optional[EnchantmentType]:
    return _global_registry.lookup(alias)


def all_enchantments() -> Tuple[EnchantmentType, ...]:
    return _global_registry.all()
