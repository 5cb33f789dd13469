"""
Minimal interactive CLI entrypoint for the crop advisor.

Architectural role:
- Provides a terminal-only interface over the core engine.
- Delegates each question to `app.core.engine.process_chat`.

Request lifecycle (per user turn, CLI):
1. Read a single line from stdin.
2. Handle local control commands (`exit`/`quit`).
3. Send the question as a single-turn conversation.
4. Print one `- ` line per returned bullet.

Input validation behavior:
- Empty input is ignored and does not call core.

Error handling strategy:
- Pipeline errors (missing key, provider failure) print one line and the loop
  continues.
- EOF and keyboard interrupts end the session without traceback output.

Side effects:
- No conversation history is kept between questions.
"""

import sys
import asyncio

from app.core.engine import process_chat
from app.core.errors import AdvisorError, ProviderError
from app.llm.provider_config import load_settings


# =========================================================
# UTF-8 SAFE STDOUT
# Configures best-effort UTF-8 console output without failing startup.
# =========================================================

def _reconfigure_stdout():
    if hasattr(sys.stdout, "reconfigure"):
        try:
            sys.stdout.reconfigure(encoding="utf-8", errors="ignore")
        except (OSError, ValueError):
            pass


def ask(question: str, settings) -> list[str]:
    """Send one question to the advisor and return bullet strings."""
    messages = [{"role": "user", "text": question}]
    return asyncio.run(process_chat(messages, settings))


def render_bullets(bullets: list[str]) -> str:
    return "\n".join(f"- {bullet}" for bullet in bullets)


# =========================================================
# MAIN APPLICATION LOOP
# =========================================================

def main(settings=None):
    """
    Run the interactive terminal session.

    Error handling strategy:
    - `AdvisorError` subclasses print `Error: <message>` and continue.
    - EOF and keyboard interrupts are handled gracefully.
    """
    _reconfigure_stdout()
    settings = settings or load_settings()

    print(f"Crop advisor started with model {settings.model}. (Type 'exit' to quit)\n")
    print("-" * 60)

    while True:

        try:
            question = input("Question: ").strip()

        except EOFError:
            print()
            break

        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if not question:
            continue

        if question.lower() in ("exit", "quit"):
            print("Shutting down.")
            break

        try:
            bullets = ask(question, settings)
        except ProviderError as err:
            print(f"Error: {err.public_message}: {err.details}")
            continue
        except AdvisorError as err:
            print(f"Error: {err.public_message}")
            continue

        print("\nAdvice:\n")
        print(render_bullets(bullets))
        print("\n" + "-" * 60 + "\n")


if __name__ == "__main__":
    main()
