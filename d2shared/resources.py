"""Paths and names of game resources.

Paths that contain ``{LANG}`` are resolved by the file provider to the
directory of the active language.
"""

from __future__ import annotations

LANGUAGE_CODE = ""

# --- Screens ---

LOADING_SCREEN = "/data/global/ui/Loading/loadingscreen.dc6"

# --- Main Menu ---

TRADEMARK_SCREEN = "/data/global/ui/FrontEnd/trademarkscreenEXP.dc6"
GAME_SELECT_SCREEN = "/data/global/ui/FrontEnd/gameselectscreenEXP.dc6"
DIABLO2_LOGO_FIRE_LEFT = "/data/global/ui/FrontEnd/D2logoFireLeft.DC6"
DIABLO2_LOGO_FIRE_RIGHT = "/data/global/ui/FrontEnd/D2logoFireRight.DC6"
DIABLO2_LOGO_BLACK_LEFT = "/data/global/ui/FrontEnd/D2logoBlackLeft.DC6"
DIABLO2_LOGO_BLACK_RIGHT = "/data/global/ui/FrontEnd/D2logoBlackRight.DC6"

# --- Credits ---

CREDITS_BACKGROUND = "/data/global/ui/CharSelect/creditsbckgexpand.dc6"
CREDITS_TEXT = "/data/local/ui/{LANG}/ExpansionCredits.txt"

# --- Character Select Screen ---

CHARACTER_SELECT_BACKGROUND = "/data/global/ui/FrontEnd/charactercreationscreenEXP.dc6"
CHARACTER_SELECT_CAMPFIRE = "/data/global/ui/FrontEnd/fire.DC6"

CHARACTER_SELECT_BARBARIAN_UNSELECTED = "/data/global/ui/FrontEnd/barbarian/banu1.DC6"
CHARACTER_SELECT_BARBARIAN_UNSELECTED_H = "/data/global/ui/FrontEnd/barbarian/banu2.DC6"
CHARACTER_SELECT_BARBARIAN_SELECTED = "/data/global/ui/FrontEnd/barbarian/banu3.DC6"
CHARACTER_SELECT_BARBARIAN_FORWARD_WALK = "/data/global/ui/FrontEnd/barbarian/bafw.DC6"
CHARACTER_SELECT_BARBARIAN_FORWARD_WALK_OVERLAY = "/data/global/ui/FrontEnd/barbarian/BAFWs.DC6"
CHARACTER_SELECT_BARBARIAN_BACK_WALK = "/data/global/ui/FrontEnd/barbarian/babw.DC6"

CHARACTER_SELECT_SORCERESS_UNSELECTED = "/data/global/ui/FrontEnd/sorceress/SONU1.DC6"
CHARACTER_SELECT_SORCERESS_UNSELECTED_H = "/data/global/ui/FrontEnd/sorceress/SONU2.DC6"
CHARACTER_SELECT_SORCERESS_SELECTED = "/data/global/ui/FrontEnd/sorceress/SONU3.DC6"
CHARACTER_SELECT_SORCERESS_SELECTED_OVERLAY = "/data/global/ui/FrontEnd/sorceress/SONU3s.DC6"
CHARACTER_SELECT_SORCERESS_FORWARD_WALK = "/data/global/ui/FrontEnd/sorceress/SOFW.DC6"
CHARACTER_SELECT_SORCERESS_FORWARD_WALK_OVERLAY = "/data/global/ui/FrontEnd/sorceress/SOFWs.DC6"
CHARACTER_SELECT_SORCERESS_BACK_WALK = "/data/global/ui/FrontEnd/sorceress/SOBW.DC6"
CHARACTER_SELECT_SORCERESS_BACK_WALK_OVERLAY = "/data/global/ui/FrontEnd/sorceress/SOBWs.DC6"

CHARACTER_SELECT_NECROMANCER_UNSELECTED = "/data/global/ui/FrontEnd/necromancer/NENU1.DC6"
CHARACTER_SELECT_NECROMANCER_UNSELECTED_H = "/data/global/ui/FrontEnd/necromancer/NENU2.DC6"
CHARACTER_SELECT_NECROMANCER_SELECTED = "/data/global/ui/FrontEnd/necromancer/NENU3.DC6"
CHARACTER_SELECT_NECROMANCER_SELECTED_OVERLAY = "/data/global/ui/FrontEnd/necromancer/NENU3s.DC6"
CHARACTER_SELECT_NECROMANCER_FORWARD_WALK = "/data/global/ui/FrontEnd/necromancer/NEFW.DC6"
CHARACTER_SELECT_NECROMANCER_FORWARD_WALK_OVERLAY = "/data/global/ui/FrontEnd/necromancer/NEFWs.DC6"
CHARACTER_SELECT_NECROMANCER_BACK_WALK = "/data/global/ui/FrontEnd/necromancer/NEBW.DC6"
CHARACTER_SELECT_NECROMANCER_BACK_WALK_OVERLAY = "/data/global/ui/FrontEnd/necromancer/NEBWs.DC6"

CHARACTER_SELECT_PALADIN_UNSELECTED = "/data/global/ui/FrontEnd/paladin/PANU1.DC6"
CHARACTER_SELECT_PALADIN_UNSELECTED_H = "/data/global/ui/FrontEnd/paladin/PANU2.DC6"
CHARACTER_SELECT_PALADIN_SELECTED = "/data/global/ui/FrontEnd/paladin/PANU3.DC6"
CHARACTER_SELECT_PALADIN_FORWARD_WALK = "/data/global/ui/FrontEnd/paladin/PAFW.DC6"
CHARACTER_SELECT_PALADIN_FORWARD_WALK_OVERLAY = "/data/global/ui/FrontEnd/paladin/PAFWs.DC6"
CHARACTER_SELECT_PALADIN_BACK_WALK = "/data/global/ui/FrontEnd/paladin/PABW.DC6"

CHARACTER_SELECT_AMAZON_UNSELECTED = "/data/global/ui/FrontEnd/amazon/AMNU1.DC6"
CHARACTER_SELECT_AMAZON_UNSELECTED_H = "/data/global/ui/FrontEnd/amazon/AMNU2.DC6"
CHARACTER_SELECT_AMAZON_SELECTED = "/data/global/ui/FrontEnd/amazon/AMNU3.DC6"
CHARACTER_SELECT_AMAZON_FORWARD_WALK = "/data/global/ui/FrontEnd/amazon/AMFW.DC6"
CHARACTER_SELECT_AMAZON_FORWARD_WALK_OVERLAY = "/data/global/ui/FrontEnd/amazon/AMFWs.DC6"
CHARACTER_SELECT_AMAZON_BACK_WALK = "/data/global/ui/FrontEnd/amazon/AMBW.DC6"

CHARACTER_SELECT_ASSASSIN_UNSELECTED = "/data/global/ui/FrontEnd/assassin/ASNU1.DC6"
CHARACTER_SELECT_ASSASSIN_UNSELECTED_H = "/data/global/ui/FrontEnd/assassin/ASNU2.DC6"
CHARACTER_SELECT_ASSASSIN_SELECTED = "/data/global/ui/FrontEnd/assassin/ASNU3.DC6"
CHARACTER_SELECT_ASSASSIN_FORWARD_WALK = "/data/global/ui/FrontEnd/assassin/ASFW.DC6"
CHARACTER_SELECT_ASSASSIN_BACK_WALK = "/data/global/ui/FrontEnd/assassin/ASBW.DC6"

CHARACTER_SELECT_DRUID_UNSELECTED = "/data/global/ui/FrontEnd/druid/DZNU1.dc6"
CHARACTER_SELECT_DRUID_UNSELECTED_H = "/data/global/ui/FrontEnd/druid/DZNU2.dc6"
CHARACTER_SELECT_DRUID_SELECTED = "/data/global/ui/FrontEnd/druid/DZNU3.DC6"
CHARACTER_SELECT_DRUID_FORWARD_WALK = "/data/global/ui/FrontEnd/druid/DZFW.DC6"
CHARACTER_SELECT_DRUID_BACK_WALK = "/data/global/ui/FrontEnd/druid/DZBW.DC6"

# --- Character Selection ---

CHARACTER_SELECTION_BACKGROUND = "/data/global/ui/CharSelect/characterselectscreenEXP.dc6"
CHARACTER_SELECTION_SELECT_BOX = "/data/global/ui/CharSelect/charselectbox.dc6"
POP_UP_OK_CANCEL = "/data/global/ui/FrontEnd/PopUpOKCancel.dc6"

# --- Game ---

GAME_PANELS = "/data/global/ui/PANEL/800ctrlpnl7.dc6"
GAME_GLOBE_OVERLAP = "/data/global/ui/PANEL/overlap.DC6"
HEALTH_MANA = "/data/global/ui/PANEL/hlthmana.DC6"
GAME_SMALL_MENU_BUTTON = "/data/global/ui/PANEL/menubutton.DC6"  # inventory popout
SKILL_ICON = "/data/global/ui/PANEL/Skillicon.DC6"  # skill icon button
ADD_SKILL_BUTTON = "/data/global/ui/PANEL/level.DC6"

# --- Mouse Pointers ---

CURSOR_DEFAULT = "/data/global/ui/CURSOR/ohand.DC6"

# --- Fonts ---

FONT6 = "/data/local/font/latin/font6"
FONT8 = "/data/local/font/latin/font8"
FONT16 = "/data/local/font/latin/font16"
FONT24 = "/data/local/font/latin/font24"
FONT30 = "/data/local/font/latin/font30"
FONT42 = "/data/local/font/latin/font42"
FONT_FORMAL12 = "/data/local/font/latin/fontformal12"
FONT_FORMAL11 = "/data/local/font/latin/fontformal11"
FONT_FORMAL10 = "/data/local/font/latin/fontformal10"
FONT_EXOCET10 = "/data/local/font/latin/fontexocet10"
FONT_EXOCET8 = "/data/local/font/latin/fontexocet8"
FONT_SUCKER = "/data/local/font/latin/ReallyTheLastSucker"
FONT_RIDICULOUS = "/data/local/font/latin/fontridiculous"

# --- UI ---

WIDE_BUTTON_BLANK = "/data/global/ui/FrontEnd/WideButtonBlank.dc6"
MEDIUM_BUTTON_BLANK = "/data/global/ui/FrontEnd/MediumButtonBlank.dc6"
CANCEL_BUTTON = "/data/global/ui/FrontEnd/CancelButtonBlank.dc6"
NARROW_BUTTON_BLANK = "/data/global/ui/FrontEnd/NarrowButtonBlank.dc6"
SHORT_BUTTON_BLANK = "/data/global/ui/CharSelect/ShortButtonBlank.dc6"
TEXT_BOX2 = "/data/global/ui/FrontEnd/textbox2.dc6"
TALL_BUTTON_BLANK = "/data/global/ui/CharSelect/TallButtonBlank.dc6"
CHECKBOX = "/data/global/ui/FrontEnd/clickbox.dc6"
SCROLLBAR = "/data/global/ui/PANEL/scrollbar.dc6"

# --- Game UI ---

PENT_SPIN = "/data/global/ui/CURSOR/pentspin.DC6"
MINIPANEL_SMALL = "/data/global/ui/PANEL/minipanel_s.dc6"
MINIPANEL_BUTTON = "/data/global/ui/PANEL/minipanelbtn.DC6"

FRAME = "/data/global/ui/PANEL/800borderframe.dc6"
INVENTORY_CHARACTER_PANEL = "/data/global/ui/PANEL/invchar6.DC6"
INVENTORY_WEAPONS_TAB = "/data/global/ui/PANEL/invchar6Tab.DC6"
SKILLS_PANEL_AMAZON = "/data/global/ui/SPELLS/skltree_a_back.DC6"
SKILLS_PANEL_BARBARIAN = "/data/global/ui/SPELLS/skltree_b_back.DC6"
SKILLS_PANEL_DRUID = "/data/global/ui/SPELLS/skltree_d_back.DC6"
SKILLS_PANEL_ASSASSIN = "/data/global/ui/SPELLS/skltree_i_back.DC6"
SKILLS_PANEL_NECROMANCER = "/data/global/ui/SPELLS/skltree_n_back.DC6"
SKILLS_PANEL_PALADIN = "/data/global/ui/SPELLS/skltree_p_back.DC6"
SKILLS_PANEL_SORCERER = "/data/global/ui/SPELLS/skltree_s_back.DC6"

GENERIC_SKILLS = "/data/global/ui/SPELLS/Skillicon.DC6"
AMAZON_SKILLS = "/data/global/ui/SPELLS/AmSkillicon.DC6"
BARBARIAN_SKILLS = "/data/global/ui/SPELLS/BaSkillicon.DC6"
DRUID_SKILLS = "/data/global/ui/SPELLS/DrSkillicon.DC6"
ASSASSIN_SKILLS = "/data/global/ui/SPELLS/AsSkillicon.DC6"
NECROMANCER_SKILLS = "/data/global/ui/SPELLS/NeSkillicon.DC6"
PALADIN_SKILLS = "/data/global/ui/SPELLS/PaSkillicon.DC6"
SORCERER_SKILLS = "/data/global/ui/SPELLS/SoSkillicon.DC6"

RUN_BUTTON = "/data/global/ui/PANEL/runbutton.dc6"
MENU_BUTTON = "/data/global/ui/PANEL/menubutton.DC6"
GOLD_COIN_BUTTON = "/data/global/ui/panel/goldcoinbtn.dc6"
SQUARE_BUTTON = "/data/global/ui/panel/buysellbtn.dc6"

ARMOR_PLACEHOLDER = "/data/global/ui/PANEL/inv_armor.DC6"
BELT_PLACEHOLDER = "/data/global/ui/PANEL/inv_belt.DC6"
BOOTS_PLACEHOLDER = "/data/global/ui/PANEL/inv_boots.DC6"
HELM_GLOVE_PLACEHOLDER = "/data/global/ui/PANEL/inv_helm_glove.DC6"
RING_AMULET_PLACEHOLDER = "/data/global/ui/PANEL/inv_ring_amulet.DC6"
WEAPONS_PLACEHOLDER = "/data/global/ui/PANEL/inv_weapons.DC6"

# --- Data ---

EXPANSION_STRING_TABLE = "/data/local/lng/{LANG}/expansionstring.tbl"
STRING_TABLE = "/data/local/lng/{LANG}/string.tbl"
PATCH_STRING_TABLE = "/data/local/lng/{LANG}/patchstring.tbl"
LEVEL_PRESET = "/data/global/excel/LvlPrest.txt"
LEVEL_TYPE = "/data/global/excel/LvlTypes.txt"
OBJECT_TYPE = "/data/global/excel/objtype.bin"
LEVEL_WARP = "/data/global/excel/LvlWarp.bin"
LEVEL_DETAILS = "/data/global/excel/Levels.bin"
OBJECT_DETAILS = "/data/global/excel/Objects.txt"
SOUND_SETTINGS = "/data/global/excel/Sounds.txt"

# --- Animations ---

OBJECT_DATA = "/data/global/objects"
ANIMATION_DATA = "/data/global/animdata.d2"
PLAYER_ANIMATION_BASE = "/data/global/CHARS"

# --- Inventory Data ---

WEAPONS = "/data/global/excel/weapons.txt"
ARMOR = "/data/global/excel/armor.txt"
MISC = "/data/global/excel/misc.txt"
UNIQUE_ITEMS = "/data/global/excel/UniqueItems.txt"

# --- Character Data ---

EXPERIENCE = "/data/global/excel/experience.txt"
CHAR_STATS = "/data/global/excel/charstats.txt"

# --- Music ---

BGM_TITLE = "/data/global/music/introedit.wav"
BGM_OPTIONS = "/data/global/music/Common/options.wav"
BGM_ACT1_ANDARIEL_ACTION = "/data/global/music/Act1/andarielaction.wav"
BGM_ACT1_BLOOD_RAVEN_RESOLUTION = "/data/global/music/Act1/bloodravenresolution.wav"
BGM_ACT1_CAVES = "/data/global/music/Act1/caves.wav"
BGM_ACT1_CRYPT = "/data/global/music/Act1/crypt.wav"
BGM_ACT1_DEN_OF_EVIL_ACTION = "/data/global/music/Act1/denofevilaction.wav"
BGM_ACT1_MONASTERY = "/data/global/music/Act1/monastery.wav"
BGM_ACT1_TOWN1 = "/data/global/music/Act1/town1.wav"
BGM_ACT1_TRISTRAM = "/data/global/music/Act1/tristram.wav"
BGM_ACT1_WILD = "/data/global/music/Act1/wild.wav"
BGM_ACT2_DESERT = "/data/global/music/Act2/desert.wav"
BGM_ACT2_HAREM = "/data/global/music/Act2/harem.wav"
BGM_ACT2_HORADRIC_ACTION = "/data/global/music/Act2/horadricaction.wav"
BGM_ACT2_LAIR = "/data/global/music/Act2/lair.wav"
BGM_ACT2_RADAMENT_RESOLUTION = "/data/global/music/Act2/radamentresolution.wav"
BGM_ACT2_SANCTUARY = "/data/global/music/Act2/sanctuary.wav"
BGM_ACT2_SEWER = "/data/global/music/Act2/sewer.wav"
BGM_ACT2_TAINTED_SUN_ACTION = "/data/global/music/Act2/taintedsunaction.wav"
BGM_ACT2_TOMBS = "/data/global/music/Act2/tombs.wav"
BGM_ACT2_TOWN2 = "/data/global/music/Act2/town2.wav"
BGM_ACT2_VALLEY = "/data/global/music/Act2/valley.wav"
BGM_ACT3_JUNGLE = "/data/global/music/Act3/jungle.wav"
BGM_ACT3_KURAST = "/data/global/music/Act3/kurast.wav"
BGM_ACT3_KURAST_SEWER = "/data/global/music/Act3/kurastsewer.wav"
BGM_ACT3_MEF_DEATH_ACTION = "/data/global/music/Act3/mefdeathaction.wav"
BGM_ACT3_ORB_ACTION = "/data/global/music/Act3/orbaction.wav"
BGM_ACT3_SPIDER = "/data/global/music/Act3/spider.wav"
BGM_ACT3_TOWN3 = "/data/global/music/Act3/town3.wav"
BGM_ACT4_DIABLO = "/data/global/music/Act4/diablo.wav"
BGM_ACT4_DIABLO_ACTION = "/data/global/music/Act4/diabloaction.wav"
BGM_ACT4_FORGE_ACTION = "/data/global/music/Act4/forgeaction.wav"
BGM_ACT4_IZUAL_ACTION = "/data/global/music/Act4/izualaction.wav"
BGM_ACT4_MESA = "/data/global/music/Act4/mesa.wav"
BGM_ACT4_TOWN4 = "/data/global/music/Act4/town4.wav"
BGM_ACT5_BAAL = "/data/global/music/Act5/baal.wav"
BGM_ACT5_XTOWN = "/data/global/music/Act5/xtown.wav"

# --- Sound Effects ---

SFX_BUTTON_CLICK = "cursor_button_click"
SFX_AMAZON_DESELECT = "cursor_amazon_deselect"
SFX_AMAZON_SELECT = "cursor_amazon_select"
SFX_ASSASSIN_DESELECT = "/data/global/sfx/Cursor/intro/assassin deselect.wav"
SFX_ASSASSIN_SELECT = "/data/global/sfx/Cursor/intro/assassin select.wav"
SFX_BARBARIAN_DESELECT = "cursor_barbarian_deselect"
SFX_BARBARIAN_SELECT = "cursor_barbarian_select"
SFX_DRUID_DESELECT = "/data/global/sfx/Cursor/intro/druid deselect.wav"
SFX_DRUID_SELECT = "/data/global/sfx/Cursor/intro/druid select.wav"
SFX_NECROMANCER_DESELECT = "cursor_necromancer_deselect"
SFX_NECROMANCER_SELECT = "cursor_necromancer_select"
SFX_PALADIN_DESELECT = "cursor_paladin_deselect"
SFX_PALADIN_SELECT = "cursor_paladin_select"
SFX_SORCERESS_DESELECT = "cursor_sorceress_deselect"
SFX_SORCERESS_SELECT = "cursor_sorceress_select"

# --- Enemy Data ---

MON_STATS = "/data/global/excel/monstats.txt"

# --- Skill Data ---

MISSILES = "/data/global/excel/Missiles.txt"