# jpsubs_core/config.py
# -*- coding: utf-8 -*-
import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    # --- Styles ---
    'default_style': 'Dial-JPN',
    'rubi_style': 'Rubi',

    # --- Passes ---
    'split_actor_marker': 'Split',
    'merge_separator': '　',

    # --- Rule tables ---
    'rules_dir': '',  # Directory with JSON tables overriding the bundled ones

    # --- Output ---
    'output_suffix': '.normalized',
    'encoding': 'utf-8',

    # --- Logging ---
    'logs_folder': '',
    'log_compact': True,
}

class AppConfig:
    def __init__(self, settings_path=None, settings_filename='settings.json', autosave=True):
        self.script_dir = Path(__file__).resolve().parent.parent
        if settings_path is None:
            settings_path = self.script_dir / settings_filename
        self.settings_path = Path(settings_path)
        # autosave=False never writes to settings_path (files named on the command line)
        self.autosave = autosave
        self.load_error = None
        self.defaults = dict(DEFAULT_SETTINGS)
        self.settings = self.defaults.copy()
        self.load()
        self.ensure_dirs_exist()

    def load(self):
        changed = False
        if self.settings_path.exists():
            try:
                with open(self.settings_path, 'r', encoding='utf-8') as f:
                    loaded_settings = json.load(f)
                if not isinstance(loaded_settings, dict):
                    raise ValueError('settings root must be an object')

                for key, default_value in self.defaults.items():
                    if key not in loaded_settings:
                        loaded_settings[key] = default_value
                        changed = True
                self.settings = loaded_settings
            except (json.JSONDecodeError, ValueError, IOError) as e:
                logger.warning(f"Could not read settings from {self.settings_path}: {e}; using defaults")
                self.load_error = str(e)
                self.settings = self.defaults.copy()
                # The broken file is left as it is for the user to fix
                return
        else:
            self.settings = self.defaults.copy()
            changed = True

        if changed and self.autosave:
            self.save()

    def save(self):
        try:
            keys_to_save = self.defaults.keys()
            settings_to_save = {k: self.settings.get(k) for k in keys_to_save if k in self.settings}
            self.settings_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.settings_path, 'w', encoding='utf-8') as f:
                json.dump(settings_to_save, f, indent=4, ensure_ascii=False)
        except IOError as e:
            logger.error(f"Error saving settings: {e}")

    def get(self, key: str, default=None):
        return self.settings.get(key, default)

    def set(self, key: str, value):
        self.settings[key] = value

    def ensure_dirs_exist(self):
        logs_folder = self.get('logs_folder')
        if logs_folder:
            Path(logs_folder).mkdir(parents=True, exist_ok=True)
