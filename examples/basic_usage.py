from __future__ import annotations

import asyncio

from badini import BadiniAssistant, GatewayConfig


async def main() -> None:
    # Reads VITE_GEMINI_API_KEY (or a fallback variable) from the environment.
    assistant = BadiniAssistant(GatewayConfig(model="gemini-2.5-flash"))

    print(await assistant.translate_text("Good morning, friends.", "English", "Kurdish (Badini)"))
    print(await assistant.fix_grammar("me and him goes to school", "English"))
    print(await assistant.generate_seminar("Dîroka Duhokê", "2"))

if __name__ == "__main__":
    asyncio.run(main())
