from telegram import Message, ReplyKeyboardRemove, Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from eventbot.config import ALLOWED_USERS
from eventbot.core.wizard import EventWizard, OutgoingMessage

# Global wizard (sessions are kept in memory for the process lifetime)
wizard = EventWizard()


def is_allowed(update: Update):
    if not ALLOWED_USERS:
        return True
    return update.effective_user is not None and update.effective_user.id in ALLOWED_USERS


async def handle_update(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Feed /addevent and every other message in the chat to the event wizard."""
    if not is_allowed(update):
        return

    message = update.effective_message
    if message is None:
        return

    # Non-text messages (stickers, photos, ...) arrive with text=None
    reply = wizard.handle_input(update.effective_chat.id, message.text)
    if reply is None:
        return

    await send_reply(message, reply)


async def send_reply(message: Message, reply: OutgoingMessage):
    markup = ReplyKeyboardRemove() if reply.remove_keyboard else None
    await message.reply_text(reply.text, parse_mode=reply.parse_mode, reply_markup=markup)

    if reply.document is None:
        return
    try:
        await message.reply_document(document=reply.document, filename=reply.document_name)
    except TelegramError as e:
        print(f"  [ics] could not send {reply.document_name}: {e}")
