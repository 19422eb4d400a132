"""
Example bot: answers mentions and DMs in a thread, showing as typing while it works
"""

import asyncio
import os
import re

from dotenv import load_dotenv

from slackkit import BotMessage, SlackApi, SlackBot, SlackMessage, configure_logging, markdown_to_blocks

load_dotenv(".env")


def build_answer(text: str) -> str:
    """Produce a markdown answer for a question"""
    return f"# You said\n\n{text}\n\n---\n- length: {len(text)}\n- words: {len(text.split())}"


async def main():
    configure_logging()
    api = SlackApi(os.environ.get("SLACK_BOT_TOKEN"))
    bot = SlackBot(api)

    @bot.on_message
    async def handle_message(message: SlackMessage):
        if not message.mentions_bot:
            return

        # Remove bot mention
        text = re.sub(r'<@\w+>', '', message.text).strip()
        if not text:
            await message.reply_with("Hi! How can I help you?", create_thread=True)
            return

        async def answer() -> BotMessage:
            markdown = build_answer(text)
            return BotMessage(text=markdown, blocks=markdown_to_blocks(markdown))

        await message.reply_with(answer, create_thread=not message.hub.is_im)

    try:
        await bot.run()
    finally:
        await api.close()


if __name__ == "__main__":
    asyncio.run(main())
