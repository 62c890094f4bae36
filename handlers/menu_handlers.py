"""
Menu commands for the Mess Menu Bot: current meal, a single day, the full week
and the self-refreshing live status message.
"""

import logging
from telegram import Update
from telegram.error import BadRequest
from telegram.ext import ContextTypes
from telegram.helpers import escape_markdown
from database import get_theme_mode, ThemeMode
from menu import MenuLoadResult
from resolver import resolve_meal_status, day_menu, weekly_menu, normalise_day, DAYS_OF_WEEK
from utils import now_in_mess_tz, split_message
from config import DEFAULT_DB_PATH, DEFAULT_TIMEZONE, MESSAGE_CHUNK_SIZE, REFRESH_INTERVAL_SECONDS

logger = logging.getLogger(__name__)

ERROR_TEXT = "⚠️ Menu data could not be loaded. Please try again later."

PALETTES = {
    ThemeMode.LIGHT: {'serving': '🟢', 'upcoming': '⚪', 'header': '☀️'},
    ThemeMode.DARK: {'serving': '🟩', 'upcoming': '⬛', 'header': '🌙'},
}

def _md(text):
    return escape_markdown(text, version=1)

def _menu_table(context):
    result = context.bot_data.get('menu', MenuLoadResult(table={}, ok=False))
    return result.table

def _clock(context):
    return now_in_mess_tz(context.bot_data.get('timezone', DEFAULT_TIMEZONE))

def _theme_for(context, telegram_id):
    return get_theme_mode(str(telegram_id), context.bot_data.get('db_path', DEFAULT_DB_PATH))

def _render_items(items):
    if not items:
        return "_No items listed._\n"
    return "".join(f"{i}. {_md(item)}\n" for i, item in enumerate(items, start=1))

def render_status(status, theme=ThemeMode.LIGHT):
    """Markdown text for a resolved meal status, or the error state for None."""
    if status is None:
        return ERROR_TEXT
    palette = PALETTES[theme]
    meal_type = status.meal.type
    if status.is_now_serving:
        header = f"{palette['serving']} *Now Serving*"
    else:
        header = f"{palette['upcoming']} *Upcoming Dish*"
    return (
        f"{header}\n\n"
        f"*{meal_type.display_name}*\n"
        f"{meal_type.timing_string()} • {status.day_name}\n\n"
        f"*Menu*\n"
        + _render_items(status.meal.menu_items)
    )

def render_day(day, meals, theme=ThemeMode.LIGHT):
    text = f"{PALETTES[theme]['header']} *{day}*\n"
    for meal in meals:
        text += f"\n*{meal.type.display_name}* ({meal.type.timing_string()})\n"
        text += _render_items(meal.menu_items)
    return text

def render_week(table, theme=ThemeMode.LIGHT):
    return "\n".join(render_day(day, meals, theme) for day, meals in weekly_menu(table))

async def now_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Show the meal being served now, or the next one"""
    now_time, now_date = _clock(context)
    status = resolve_meal_status(_menu_table(context), now_time, now_date)
    theme = _theme_for(context, update.message.from_user.id)
    await update.message.reply_text(render_status(status, theme), parse_mode="Markdown")

async def day_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Show all meals for one day: /day <Monday|mon|today|tomorrow>"""
    table = _menu_table(context)
    if not table:
        await update.message.reply_text(ERROR_TEXT)
        return

    _, today = _clock(context)
    day = normalise_day(" ".join(context.args), today) if context.args else normalise_day('today', today)
    if not day:
        await update.message.reply_text(
            "Usage: /day <day>\nExample: /day monday, /day tue, /day tomorrow\n"
            f"Days: {', '.join(DAYS_OF_WEEK)}"
        )
        return

    theme = _theme_for(context, update.message.from_user.id)
    await update.message.reply_text(render_day(day, day_menu(table, day), theme), parse_mode="Markdown")

async def week_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Show the full weekly menu"""
    table = _menu_table(context)
    if not table:
        await update.message.reply_text(ERROR_TEXT)
        return

    theme = _theme_for(context, update.message.from_user.id)
    text = render_week(table, theme)
    # Markdown only when no line has to be hard-split across chunks
    parse_mode = "Markdown" if all(len(line) <= MESSAGE_CHUNK_SIZE for line in text.splitlines()) else None
    for chunk in split_message(text, MESSAGE_CHUNK_SIZE):
        await update.message.reply_text(chunk, parse_mode=parse_mode)

def _live_job_name(chat_id):
    return f"live-{chat_id}"

def _remove_live_jobs(context, chat_id):
    jobs = context.job_queue.get_jobs_by_name(_live_job_name(chat_id))
    for job in jobs:
        job.schedule_removal()
    return bool(jobs)

async def live_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Post the meal status and keep it updated every minute"""
    if context.job_queue is None:
        await update.message.reply_text("Live updates are not available on this bot.")
        return

    chat_id = update.effective_chat.id
    user_id = update.message.from_user.id
    _remove_live_jobs(context, chat_id)

    now_time, now_date = _clock(context)
    text = render_status(resolve_meal_status(_menu_table(context), now_time, now_date), _theme_for(context, user_id))
    message = await update.message.reply_text(text, parse_mode="Markdown")

    context.job_queue.run_repeating(
        refresh_live_status,
        interval=REFRESH_INTERVAL_SECONDS,
        first=REFRESH_INTERVAL_SECONDS,
        chat_id=chat_id,
        name=_live_job_name(chat_id),
        data={'message_id': message.message_id, 'user_id': user_id, 'text': text},
    )
    logger.info("Started live status for chat %s", chat_id)

async def stop_live_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Stop the live status updates in this chat"""
    if context.job_queue is None or not _remove_live_jobs(context, update.effective_chat.id):
        await update.message.reply_text("No live status is running in this chat.")
        return
    logger.info("Stopped live status for chat %s", update.effective_chat.id)
    await update.message.reply_text("Live status stopped.")

async def refresh_live_status(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Job callback: re-resolve the status and edit the live message if it changed"""
    job = context.job
    now_time, now_date = _clock(context)
    status = resolve_meal_status(_menu_table(context), now_time, now_date)
    text = render_status(status, _theme_for(context, job.data['user_id']))

    # Telegram rejects edits that leave the message unchanged
    if text == job.data['text']:
        return

    try:
        await context.bot.edit_message_text(
            text,
            chat_id=job.chat_id,
            message_id=job.data['message_id'],
            parse_mode="Markdown",
        )
    except BadRequest as e:
        # The live message was deleted or can no longer be edited
        logger.info("Stopping live status for chat %s: %s", job.chat_id, e)
        job.schedule_removal()
        return
    job.data['text'] = text
