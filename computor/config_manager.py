# config_manager.py
import json
from pathlib import Path

config_json = Path(__file__).resolve().parent.parent / "config.json"
ui_strings = Path(__file__).resolve().parent.parent / "ui_strings.json"


# Used for every key missing from config.json (or when the file is missing / broken)
DEFAULT_SETTINGS = {
    "decimal_places": 6,
    "fractions": False,
    "show_steps": True,
    "copy_result": False,
    "darkmode": False,
    "debug": False,
}

DEFAULT_DESCRIPTIONS = {
    "decimal_places": "Decimal places",
    "fractions": "Show roots as fractions",
    "show_steps": "Show intermediate steps",
    "copy_result": "Copy roots to clipboard after solving",
    "darkmode": "Dark mode",
    "debug": "Print debug output",
}


def _read_json(path):
    try:
        with open(path, 'r', encoding= 'utf-8') as f:
            return json.load(f)

    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def load_setting_value(key_value):
    settings_dict = dict(DEFAULT_SETTINGS)
    settings_dict.update(_read_json(config_json))

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def load_setting_description(key_value):
    settings_dict = dict(DEFAULT_DESCRIPTIONS)
    settings_dict.update(_read_json(ui_strings))

    if key_value == "all":
        return settings_dict

    else:
        return settings_dict.get(key_value, 0)


def save_setting(settings_dict):
    try:
        with open (config_json, 'w', encoding= 'utf-8') as f:
            json.dump(settings_dict, f, indent=4)
            return settings_dict

    except OSError:
        return{}
