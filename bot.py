import logging
import os
from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes
from dotenv import load_dotenv
from config import DEFAULT_MENU_PATH, DEFAULT_DB_PATH, DEFAULT_TIMEZONE
from database import init_database
from menu import load_menu_file
from handlers import (
    # User handlers
    start, help_command, theme_command,

    # Menu handlers
    now_command, day_command, week_command,
    live_command, stop_live_command,

    # Admin handlers
    reload_menu_command, show_menu_command
)

# Load environment variables
load_dotenv()
BOT_TOKEN = os.getenv('BOT_TOKEN')
OWNER_TELEGRAM_ID = os.getenv('OWNER_TELEGRAM_ID')
MENU_PATH = os.getenv('MENU_PATH', DEFAULT_MENU_PATH)
DB_PATH = os.getenv('DB_PATH', DEFAULT_DB_PATH)
MESS_TIMEZONE = os.getenv('MESS_TIMEZONE', DEFAULT_TIMEZONE)

logger = logging.getLogger(__name__)

def setup_logging():
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.INFO,
    )
    # httpx logs every polling request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)

async def error_handler(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    logger.error("Exception while handling an update", exc_info=context.error)

def main():
    setup_logging()
    init_database(DB_PATH)

    menu = load_menu_file(MENU_PATH)
    if not menu.ok:
        logger.warning("Starting without a menu: %s", menu.error)

    application = Application.builder().token(BOT_TOKEN).build()

    # Shared state for handlers
    application.bot_data['owner_telegram_id'] = OWNER_TELEGRAM_ID
    application.bot_data['menu'] = menu
    application.bot_data['menu_path'] = MENU_PATH
    application.bot_data['db_path'] = DB_PATH
    application.bot_data['timezone'] = MESS_TIMEZONE

    # Register handlers
    application.add_handler(CommandHandler('start', start))
    application.add_handler(CommandHandler('help', help_command))
    application.add_handler(CommandHandler('theme', theme_command))
    application.add_handler(CommandHandler('now', now_command))
    application.add_handler(CommandHandler('day', day_command))
    application.add_handler(CommandHandler('week', week_command))
    application.add_handler(CommandHandler('live', live_command))
    application.add_handler(CommandHandler('stoplive', stop_live_command))

    # Register admin handlers
    application.add_handler(CommandHandler('reloadmenu', reload_menu_command))
    application.add_handler(CommandHandler('showmenu', show_menu_command))

    application.add_error_handler(error_handler)

    logger.info("Bot is running...")
    application.run_polling(allowed_updates=Update.ALL_TYPES)

if __name__ == '__main__':
    main()
