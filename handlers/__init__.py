"""
Handlers module for Mess Menu Bot.
Contains all the command handlers and the live refresh job.
"""

# Import all handlers to make them available when importing from the package
from .user_handlers import start, help_command, theme_command
from .menu_handlers import (
    now_command, day_command, week_command,
    live_command, stop_live_command, refresh_live_status
)
from .admin_handlers import reload_menu_command, show_menu_command

# Export all handlers
__all__ = [
    # User handlers
    'start', 'help_command', 'theme_command',

    # Menu handlers
    'now_command', 'day_command', 'week_command',
    'live_command', 'stop_live_command', 'refresh_live_status',

    # Admin handlers
    'reload_menu_command', 'show_menu_command'
]
