"""
Shared constants for yuzupack modules.
"""

# Version
VERSION = "1.1.0"

# Character voice folders, in display order.
# Short name is the folder name without its leading ordering character.
CHARACTERS = [
    "1yoshino", "2mako", "3murasame",
    "4lena", "5koharu", "6roka",
    "7mizuha", "8rentarou", "9genjurou", "$yasuharu",
]

# Murasame ships as the default voice; picking her keeps the bundled sounds
SKIP_INDEX = 2

# Archive locales (texture sets), index 0 is the default
LOCALES = ["zh-CN", "zh-TW", "en-US"]
DEFAULT_LOCALE_INDEX = 0

# Sound file category -> sounds.json event name (iteration order is fixed)
SOUND_CATEGORIES = {
    "load": "yuzu_title_button_select_world",
    "system": "yuzu_title_button_options",
    "goodbye": "yuzu_title_button_quit_game",
    "senren": "yuzu_title_senren",
    "after": "yuzu_title_button_realms",
    "extra": "yuzu_title_button_mod_list",
}

GUI_TEXTURES = [
    "title_continue_button_normal",
    "title_continue_button_on",
    "title_logo",
    "title_mod_list_button_normal",
    "title_mod_list_button_on",
    "title_new_game_button_normal",
    "title_new_game_button_on",
    "title_options_button_normal",
    "title_options_button_on",
    "title_quit_game_button_normal",
    "title_quit_game_button_on",
    "title_realms_button_normal",
    "title_realms_button_on",
    "title_select_world_button_normal",
    "title_select_world_button_on",
]

# Minecraft formatting codes used in the archive file name
MC_COLOR_PINK = "§d"
MC_COLOR_RED = "§c"
MC_COLOR_BOLD = "§l"
MC_COLOR_GRAY = "§7"
MC_COLOR_RESET = "§r"

OUTPUT_NAME = (MC_COLOR_PINK + "OUTPUT" + MC_COLOR_GRAY + "-" + MC_COLOR_GRAY + "-"
               + MC_COLOR_RESET + "YuZuUI.zip")
OUTPUT_NAME_REPLACE = (MC_COLOR_PINK + "OUTPUT" + MC_COLOR_GRAY + "-" + MC_COLOR_RED + MC_COLOR_BOLD
                       + "REPLACE" + MC_COLOR_GRAY + "-" + MC_COLOR_RESET + "YuZuUI.zip")

# Resource pack namespace
NAMESPACE = "yuzu"

# Process exit codes
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INTERRUPTED = 130
