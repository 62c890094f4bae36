"""
Basic user commands for the Mess Menu Bot.
"""

from telegram import Update
from telegram.ext import ContextTypes
from database import get_theme_mode, set_theme_mode, toggled, ThemeMode
from config import DEFAULT_DB_PATH, REFRESH_INTERVAL_SECONDS

async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Greet the user and point them at the menu commands"""
    name = update.message.from_user.first_name or "there"
    await update.message.reply_text(
        f"Hi {name}! I show what the mess is serving.\n"
        "Try /now for the current meal or /help for all commands."
    )

async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Show help message with available commands based on user role"""
    is_owner = str(update.message.from_user.id) == context.bot_data.get('owner_telegram_id', '')

    user_commands = (
        "🍽️ *Mess Menu Bot Help* 🍽️\n\n"
        "*User Commands:*\n"
        "• /now - The meal being served now, or the next one\n"
        "• /day <day> - All meals for a day (e.g. /day monday, /day tomorrow)\n"
        "• /week - The full weekly menu\n"
        f"• /live - A status message that refreshes every {REFRESH_INTERVAL_SECONDS} seconds\n"
        "• /stoplive - Stop the live status in this chat\n"
        "• /theme - Switch between light and dark style\n"
        "• /help - Show this message\n\n"
    )

    owner_commands = (
        "*Owner Commands:*\n"
        "• /reloadmenu - Reload the menu file\n"
        "• /showmenu <meal> - Show one meal across the week (breakfast, lunch, high\\_tea, dinner)\n"
    )

    help_text = user_commands + (owner_commands if is_owner else "")

    await update.message.reply_text(help_text, parse_mode="Markdown")

async def theme_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Toggle the user's light/dark theme and save it"""
    telegram_id = str(update.message.from_user.id)
    db_path = context.bot_data.get('db_path', DEFAULT_DB_PATH)

    mode = toggled(get_theme_mode(telegram_id, db_path))
    set_theme_mode(telegram_id, mode, db_path)

    label = "🌙 Dark" if mode == ThemeMode.DARK else "☀️ Light"
    await update.message.reply_text(f"Theme set to {label}.")
