"""Enumerations shared across the game data formats."""

from __future__ import annotations

from enum import Enum, IntEnum


class AnimationFrame(IntEnum):
    """Keyframe event attached to an animation frame."""

    NO_EVENT = 0
    ATTACK = 1
    MISSILE = 2
    SOUND = 3
    SKILL = 4


class AnimationMode(IntEnum):
    """Animation modes of players, monsters and objects; ``str()`` gives the mode code."""

    PLAYER_DEATH = 0
    PLAYER_NEUTRAL = 1
    PLAYER_WALK = 2
    PLAYER_RUN = 3
    PLAYER_GET_HIT = 4
    PLAYER_TOWN_NEUTRAL = 5
    PLAYER_TOWN_WALK = 6
    PLAYER_ATTACK1 = 7
    PLAYER_ATTACK2 = 8
    PLAYER_BLOCK = 9
    PLAYER_CAST = 10
    PLAYER_THROW = 11
    PLAYER_KICK = 12
    PLAYER_SKILL1 = 13
    PLAYER_SKILL2 = 14
    PLAYER_SKILL3 = 15
    PLAYER_SKILL4 = 16
    PLAYER_DEAD = 17
    PLAYER_SEQUENCE = 18
    PLAYER_KNOCK_BACK = 19
    MONSTER_DEATH = 20
    MONSTER_NEUTRAL = 21
    MONSTER_WALK = 22
    MONSTER_GET_HIT = 23
    MONSTER_ATTACK1 = 24
    MONSTER_ATTACK2 = 25
    MONSTER_BLOCK = 26
    MONSTER_CAST = 27
    MONSTER_SKILL1 = 28
    MONSTER_SKILL2 = 29
    MONSTER_SKILL3 = 30
    MONSTER_SKILL4 = 31
    MONSTER_DEAD = 32
    MONSTER_KNOCKBACK = 33
    MONSTER_SEQUENCE = 34
    MONSTER_RUN = 35
    OBJECT_NEUTRAL = 36
    OBJECT_OPERATING = 37
    OBJECT_OPENED = 38
    OBJECT_SPECIAL1 = 39
    OBJECT_SPECIAL2 = 40
    OBJECT_SPECIAL3 = 41
    OBJECT_SPECIAL4 = 42
    OBJECT_SPECIAL5 = 43

    def __str__(self) -> str:
        return _ANIMATION_MODE_CODES[self]


_ANIMATION_MODE_CODES = dict(
    zip(
        AnimationMode,
        (
            "DT", "NU", "WL", "RN", "GH", "TN", "TW", "A1", "A2", "BL",
            "SC", "TH", "KK", "S1", "S2", "S3", "S4", "DD", "GH", "GH",
            "DT", "NU", "WL", "GH", "A1", "A2", "BL", "SC", "S1", "S2",
            "S3", "S4", "DD", "GH", "xx", "RN",
            "NU", "OP", "ON", "S1", "S2", "S3", "S4", "S5",
        ),
    )
)


class CompositeType(IntEnum):
    """Layer of a composite (multi-part) sprite."""

    HEAD = 0
    TORSO = 1
    LEGS = 2
    RIGHT_ARM = 3
    LEFT_ARM = 4
    RIGHT_HAND = 5
    LEFT_HAND = 6
    SHIELD = 7
    SPECIAL1 = 8
    SPECIAL2 = 9
    SPECIAL3 = 10
    SPECIAL4 = 11
    SPECIAL5 = 12
    SPECIAL6 = 13
    SPECIAL7 = 14
    SPECIAL8 = 15
    MAX = 16


class DrawEffect(IntEnum):
    """Blend mode used when drawing a layer."""

    PCT_TRANSPARENCY_75 = 0  # colormaps 561-816 in a .pl2
    PCT_TRANSPARENCY_50 = 1  # colormaps 305-560 in a .pl2
    PCT_TRANSPARENCY_25 = 2  # colormaps 49-304 in a .pl2
    SCREEN = 3  # colormaps 817-1072 in a .pl2
    LUMINANCE = 4  # colormaps 1073-1328 in a .pl2
    BRIGHT_ALPHA_BLENDING = 5  # colormaps 1457-1712 in a .pl2


class Hero(IntEnum):
    """Playable character class; ``str()`` gives its display name."""

    NONE = 0
    BARBARIAN = 1
    NECROMANCER = 2
    PALADIN = 3
    ASSASSIN = 4
    SORCERESS = 5
    AMAZON = 6
    DRUID = 7

    def __str__(self) -> str:
        return _HERO_NAMES[self]

    def token(self) -> str:
        """Two-letter code used in the hero's asset paths."""
        try:
            return _HERO_TOKENS[self]
        except KeyError:
            raise ValueError(f"Unknown hero token: {int(self)}") from None

    @classmethod
    def from_string(cls, s: str) -> Hero:
        """Look a hero up by display name; an empty name gives ``NONE``."""
        if not s:
            return cls.NONE
        for hero, name in _HERO_NAMES.items():
            if name == s:
                return hero
        raise ValueError(f"unable to locate Hero enum corresponding to {s!r}")


_HERO_NAMES = {
    Hero.NONE: "",
    Hero.BARBARIAN: "Barbarian",
    Hero.NECROMANCER: "Necromancer",
    Hero.PALADIN: "Paladin",
    Hero.ASSASSIN: "Assassin",
    Hero.SORCERESS: "Sorceress",
    Hero.AMAZON: "Amazon",
    Hero.DRUID: "Druid",
}

_HERO_TOKENS = {
    Hero.BARBARIAN: "BA",
    Hero.NECROMANCER: "NE",
    Hero.PALADIN: "PA",
    Hero.ASSASSIN: "AI",
    Hero.SORCERESS: "SO",
    Hero.AMAZON: "AM",
    Hero.DRUID: "DZ",
}


class HeroStance(IntEnum):
    """Hero state on the character selection screen."""

    IDLE = 0
    IDLE_SELECTED = 1
    APPROACHING = 2
    SELECTED = 3
    RETREATING = 4


class InventoryItemType(IntEnum):
    ITEM = 0
    WEAPON = 1
    ARMOR = 2


class LayerStreamType(IntEnum):
    """Kind of layer stream in a map tile file."""

    WALL1 = 0
    WALL2 = 1
    WALL3 = 2
    WALL4 = 3
    ORIENTATION1 = 4
    ORIENTATION2 = 5
    ORIENTATION3 = 6
    ORIENTATION4 = 7
    FLOOR1 = 8
    FLOOR2 = 9
    SHADOW = 10
    SUBSTITUTE = 11


class Orientation(IntEnum):
    """Orientation of a map tile."""

    FLOORS = 0
    LEFT_WALL = 1
    RIGHT_WALL = 2
    RIGHT_PART_OF_NORTH_CORNER_WALL = 3
    LEFT_PART_OF_NORTH_CORNER_WALL = 4
    LEFT_END_WALL = 5
    RIGHT_END_WALL = 6
    SOUTH_CORNER_WALL = 7
    LEFT_WALL_WITH_DOOR = 8
    RIGHT_WALL_WITH_DOOR = 9
    SPECIAL_TILE1 = 10
    SPECIAL_TILE2 = 11
    PILLARS_COLUMNS_AND_STANDALONE_OBJECTS = 12
    SHADOWS = 13
    TREES = 14
    ROOFS = 15
    LOWER_WALLS_EQUIVALENT_TO_LEFT_WALL = 16
    LOWER_WALLS_EQUIVALENT_TO_RIGHT_WALL = 17
    LOWER_WALLS_EQUIVALENT_TO_RIGHT_LEFT_NORTH_CORNER_WALL = 18
    LOWER_WALLS_EQUIVALENT_TO_SOUTH_CORNER_WALL = 19


class PaletteType(str, Enum):
    """Named palette."""

    ACT1 = "act1"
    ACT2 = "act2"
    ACT3 = "act3"
    ACT4 = "act4"
    ACT5 = "act5"
    END_GAME = "endgame"
    END_GAME2 = "endgame2"
    FECHAR = "fechar"
    LOADING = "loading"
    MENU0 = "menu0"
    MENU1 = "menu1"
    MENU2 = "menu2"
    MENU3 = "menu3"
    MENU4 = "menu4"
    SKY = "sky"
    STATIC = "static"
    TRADEMARK = "trademark"
    UNITS = "units"

    def __str__(self) -> str:
        return self.value


class RegionId(IntEnum):
    """Map region identifier."""

    ACT1_TOWN = 1
    ACT1_WILDERNESS = 2
    ACT1_CAVE = 3
    ACT1_CRYPT = 4
    ACT1_MONASTERY = 5
    ACT1_COURTYARD = 6
    ACT1_BARRACKS = 7
    ACT1_JAIL = 8
    ACT1_CATHEDRAL = 9
    ACT1_CATACOMBS = 10
    ACT1_TRISTRAM = 11
    ACT2_TOWN = 12
    ACT2_SEWER = 13
    ACT2_HAREM = 14
    ACT2_BASEMENT = 15
    ACT2_DESERT = 16
    ACT2_TOMB = 17
    ACT2_LAIR = 18
    ACT2_ARCANE = 19
    ACT3_TOWN = 20
    ACT3_JUNGLE = 21
    ACT3_KURAST = 22
    ACT3_SPIDER = 23
    ACT3_DUNGEON = 24
    ACT3_SEWER = 25
    ACT4_TOWN = 26
    ACT4_MESA = 27
    ACT4_LAVA = 28
    ACT5_TOWN = 29
    ACT5_SIEGE = 30
    ACT5_BARRICADE = 31
    ACT5_TEMPLE = 32
    ACT5_ICE_CAVES = 33
    ACT5_BAAL = 34
    ACT5_LAVA = 35


class RegionLayerType(IntEnum):
    FLOORS = 0
    WALLS = 1
    SHADOWS = 2


class WeaponClass(IntEnum):
    """Weapon class of an animation; ``str()`` gives its three-letter code."""

    NONE = 0
    HAND_TO_HAND = 1
    BOW = 2
    ONE_HAND_SWING = 3
    ONE_HAND_THRUST = 4
    STAFF = 5
    TWO_HAND_SWING = 6
    TWO_HAND_THRUST = 7
    CROSSBOW = 8
    LEFT_JAB_RIGHT_SWING = 9
    LEFT_JAB_RIGHT_THRUST = 10
    LEFT_SWING_RIGHT_SWING = 11
    LEFT_SWING_RIGHT_THRUST = 12
    ONE_HAND_TO_HAND = 13
    TWO_HAND_TO_HAND = 14

    def __str__(self) -> str:
        return _WEAPON_CLASS_CODES[self]

    @classmethod
    def from_string(cls, s: str) -> WeaponClass:
        """Look a weapon class up by code; an empty code gives ``NONE``."""
        if not s:
            return cls.NONE
        for weapon_class, code in _WEAPON_CLASS_CODES.items():
            if code == s:
                return weapon_class
        raise ValueError(f"unable to locate WeaponClass enum corresponding to {s!r}")


_WEAPON_CLASS_CODES = {
    WeaponClass.NONE: "",
    WeaponClass.HAND_TO_HAND: "hth",
    WeaponClass.BOW: "bow",
    WeaponClass.ONE_HAND_SWING: "1hs",
    WeaponClass.ONE_HAND_THRUST: "1ht",
    WeaponClass.STAFF: "stf",
    WeaponClass.TWO_HAND_SWING: "2hs",
    WeaponClass.TWO_HAND_THRUST: "2ht",
    WeaponClass.CROSSBOW: "xbw",
    WeaponClass.LEFT_JAB_RIGHT_SWING: "1js",
    WeaponClass.LEFT_JAB_RIGHT_THRUST: "1jt",
    WeaponClass.LEFT_SWING_RIGHT_SWING: "1ss",
    WeaponClass.LEFT_SWING_RIGHT_THRUST: "1st",
    WeaponClass.ONE_HAND_TO_HAND: "ht1",
    WeaponClass.TWO_HAND_TO_HAND: "ht2",
}