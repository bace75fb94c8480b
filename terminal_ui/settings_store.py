import configparser
from pathlib import Path

from klondike.Core import SYMBOL_STYLES, GameConfig

SETTINGS_PATH = Path(__file__).with_name("settings.ini")

DEFAULT_SETTINGS = {
    "seed": "",
    "symbols": "unicode",
    "show_help": "yes",
}

TRUE_WORDS = ("1", "yes", "true", "on")
FALSE_WORDS = ("0", "no", "false", "off")


def _sanitize(settings):
    data = dict(DEFAULT_SETTINGS)
    data.update({k: v for k, v in settings.items() if k in DEFAULT_SETTINGS})

    raw_seed = str(data["seed"]).strip()
    try:
        data["seed"] = str(int(raw_seed)) if raw_seed not in ("", "None") else ""
    except ValueError:
        data["seed"] = DEFAULT_SETTINGS["seed"]

    if data["symbols"] not in SYMBOL_STYLES:
        data["symbols"] = DEFAULT_SETTINGS["symbols"]

    show_help = str(data["show_help"]).strip().lower()
    if show_help in TRUE_WORDS:
        data["show_help"] = "yes"
    elif show_help in FALSE_WORDS:
        data["show_help"] = "no"
    else:
        data["show_help"] = DEFAULT_SETTINGS["show_help"]
    return data


def load_settings(path=None):
    path = SETTINGS_PATH if path is None else Path(path)
    if not path.exists():
        return dict(DEFAULT_SETTINGS)
    parser = configparser.ConfigParser()
    try:
        parser.read(path, encoding="utf-8")
    except (configparser.Error, OSError, UnicodeDecodeError):
        return dict(DEFAULT_SETTINGS)
    if "game" not in parser:
        return dict(DEFAULT_SETTINGS)
    return _sanitize(dict(parser["game"]))


def save_settings(settings, path=None):
    path = SETTINGS_PATH if path is None else Path(path)
    parser = configparser.ConfigParser()
    parser["game"] = _sanitize(settings)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        parser.write(f)


def config_from_settings(settings) -> GameConfig:
    data = _sanitize(settings)
    seed = int(data["seed"]) if data["seed"] else None
    return GameConfig(seed=seed, symbols=data["symbols"], showHelp=data["show_help"] == "yes")
