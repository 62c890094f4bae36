"""
Configuration settings for the Mess Menu Bot.
"""

# Bundled weekly menu document
DEFAULT_MENU_PATH = 'data/messData.json'

# SQLite file holding per-user preferences
DEFAULT_DB_PATH = 'mess_menu.db'

# Mess clock; meal windows are evaluated in this timezone
DEFAULT_TIMEZONE = 'Asia/Kolkata'

# Live status messages are refreshed this often
REFRESH_INTERVAL_SECONDS = 60

# Telegram rejects messages over 4096 characters
MESSAGE_CHUNK_SIZE = 4000

# Preference key the theme choice is stored under
THEME_MODE_KEY = 'theme_mode'
