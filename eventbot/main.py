from telegram.ext import Application, CommandHandler, MessageHandler, filters

from eventbot.config import (
    TELEGRAM_TOKEN, ALLOWED_USERS, EVENT_TIMEZONE, EVENT_DURATION_MINUTES, SEND_ICS_ATTACHMENT,
)
from eventbot.bot.telegram_handler import handle_update


def build_application(token):
    app = Application.builder().token(token).build()
    app.add_handler(CommandHandler(["addevent", "start"], handle_update))
    # Any other command-looking reply (e.g. "/standup" as a title) is wizard input too
    app.add_handler(MessageHandler(filters.ALL, handle_update))
    return app


def main():
    if not TELEGRAM_TOKEN:
        print("ERROR: Set TELEGRAM_BOT_TOKEN in .env")
        return

    print("Starting eventbot...")
    print(f"Timezone: {EVENT_TIMEZONE}")
    print(f"Duration: {EVENT_DURATION_MINUTES} min")
    print(f"ICS attachment: {SEND_ICS_ATTACHMENT}")
    print(f"Allowed users: {ALLOWED_USERS or 'everyone'}")

    app = build_application(TELEGRAM_TOKEN)

    print("Bot is running. Send /addevent on Telegram.")
    app.run_polling()


if __name__ == "__main__":
    main()
