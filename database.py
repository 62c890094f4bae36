import logging
import sqlite3
from enum import Enum
from config import DEFAULT_DB_PATH, THEME_MODE_KEY

logger = logging.getLogger(__name__)

class ThemeMode(Enum):
    LIGHT = 'LIGHT'
    DARK = 'DARK'

def init_database(db_path=DEFAULT_DB_PATH):
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()
    cursor.execute('''
        CREATE TABLE IF NOT EXISTS Preferences (
            telegram_id TEXT NOT NULL,
            pref_key TEXT NOT NULL,
            pref_value TEXT NOT NULL,
            PRIMARY KEY (telegram_id, pref_key)
        )
    ''')
    conn.commit()
    conn.close()

def get_preference(telegram_id, key, db_path=DEFAULT_DB_PATH):
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()
    cursor.execute('SELECT pref_value FROM Preferences WHERE telegram_id = ? AND pref_key = ?', (telegram_id, key))
    row = cursor.fetchone()
    conn.close()
    return row[0] if row else None

def set_preference(telegram_id, key, value, db_path=DEFAULT_DB_PATH):
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()
    cursor.execute('''
        INSERT INTO Preferences (telegram_id, pref_key, pref_value) VALUES (?, ?, ?)
        ON CONFLICT (telegram_id, pref_key) DO UPDATE SET pref_value = excluded.pref_value
    ''', (telegram_id, key, value))
    conn.commit()
    conn.close()

def get_theme_mode(telegram_id, db_path=DEFAULT_DB_PATH):
    """Stored theme for a user. LIGHT when nothing is stored or the value is unknown."""
    stored = get_preference(telegram_id, THEME_MODE_KEY, db_path)
    if stored is None:
        return ThemeMode.LIGHT
    try:
        return ThemeMode[stored]
    except KeyError:
        logger.warning("Ignoring invalid theme %r for user %s", stored, telegram_id)
        return ThemeMode.LIGHT

def set_theme_mode(telegram_id, mode, db_path=DEFAULT_DB_PATH):
    set_preference(telegram_id, THEME_MODE_KEY, mode.name, db_path)

def toggled(mode):
    """Flip between LIGHT and DARK."""
    return ThemeMode.LIGHT if mode == ThemeMode.DARK else ThemeMode.DARK
