from datetime import datetime
import pytz
from config import DEFAULT_TIMEZONE

def now_in_mess_tz(tz_name=DEFAULT_TIMEZONE):
    """Current (time, date) on the mess clock."""
    tz = pytz.timezone(tz_name)
    now = datetime.now(tz)
    return now.time(), now.date()

def split_message(text, chunk_size):
    """Split text into Telegram-sized chunks, preferring line boundaries."""
    if len(text) <= chunk_size:
        return [text]
    chunks = []
    current = ''
    for line in text.splitlines(keepends=True):
        while len(line) > chunk_size:
            if current:
                chunks.append(current)
                current = ''
            chunks.append(line[:chunk_size])
            line = line[chunk_size:]
        if len(current) + len(line) > chunk_size:
            chunks.append(current)
            current = ''
        current += line
    if current:
        chunks.append(current)
    return chunks
