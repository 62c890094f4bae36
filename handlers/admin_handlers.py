"""
Owner-only commands for the Mess Menu Bot.
"""

import logging
from telegram import Update
from telegram.ext import ContextTypes
import pandas as pd
from menu import load_menu_file, dishes_for, MealType
from resolver import DAYS_OF_WEEK
from config import DEFAULT_MENU_PATH, MESSAGE_CHUNK_SIZE
from utils import split_message

logger = logging.getLogger(__name__)

def _is_owner(update, context):
    return str(update.message.from_user.id) == context.bot_data.get('owner_telegram_id')

async def reload_menu_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Reload the menu document from disk (owner only)"""
    if not _is_owner(update, context):
        await update.message.reply_text("Unauthorized: Only the mess owner can use this command.")
        return

    path = context.bot_data.get('menu_path', DEFAULT_MENU_PATH)
    result = load_menu_file(path)
    if not result.ok:
        await update.message.reply_text(f"❌ Could not reload menu: {result.error}\nThe previous menu is still in use.")
        return

    context.bot_data['menu'] = result
    logger.info("Menu reloaded from %s", path)
    days = {day for day_menus in result.table.values() for day in day_menus}
    await update.message.reply_text(
        f"✅ Menu reloaded: {len(result.table)} meal types, {len(days)} days."
    )

async def show_menu_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Show one meal type across the whole week as a table (owner only)"""
    if not _is_owner(update, context):
        await update.message.reply_text("Unauthorized: Only the mess owner can use this command.")
        return

    if not context.args:
        await update.message.reply_text("Usage: /showmenu <meal>\nMeals: breakfast, lunch, high_tea, dinner")
        return

    meal_type = MealType.from_json_key("_".join(context.args).lower())
    if meal_type is None:
        await update.message.reply_text("Invalid meal. Use: breakfast, lunch, high_tea, dinner")
        return

    table = context.bot_data['menu'].table if 'menu' in context.bot_data else {}
    df = pd.DataFrame({
        'Day': list(DAYS_OF_WEEK),
        'Items': [len(dishes_for(table, meal_type, day)) for day in DAYS_OF_WEEK],
        'Menu': [", ".join(dishes_for(table, meal_type, day)) or "-" for day in DAYS_OF_WEEK],
    })

    if df['Items'].sum() == 0:
        await update.message.reply_text(f"No {meal_type.display_name} entries in the menu.")
        return

    result = f"📋 {meal_type.display_name} ({meal_type.timing_string()})\n\n"
    result += df.to_string(index=False)

    # Plain text; dish names may contain Markdown characters
    for chunk in split_message(result, MESSAGE_CHUNK_SIZE):
        await update.message.reply_text(chunk)
