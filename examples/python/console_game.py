"""
🧞 Console Game — Play Akinator from your terminal

Think of a character, animal or object and answer Akinator's questions:
yes (y), no (n), i don't know (idk), probably (p), probably not (pn).
Type "back" to undo your last answer, or "quit" to make Akinator guess now.

Usage:
    1. Optionally set AKINATOR_LANGUAGE, AKINATOR_THEME, AKINATOR_CHILD_MODE
    2. pip install requests
    3. python console_game.py
"""

import os
import sys

# Add the SDK to path (for local development)
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "sdk", "python"))

from akinator_sdk import Akinator, Game


# ─── Config ───────────────────────────────────────────────────────────────────

LANGUAGE = os.environ.get("AKINATOR_LANGUAGE", "en")
THEME = os.environ.get("AKINATOR_THEME", "characters")
CHILD_MODE = os.environ.get("AKINATOR_CHILD_MODE", "").lower() in ("1", "true", "yes")


# ─── Strategy ─────────────────────────────────────────────────────────────────

def ask_player(question):
    """Show the question and read the player's answer from stdin."""
    print(f"\n#{question.step + 1} ({question.progression:.0f}%) {question.text}")
    try:
        reply = input("> ").strip()
    except EOFError:
        return None

    if reply.lower() in ("quit", "q", "exit"):
        return None
    return reply


# ─── Main ─────────────────────────────────────────────────────────────────────

def main():
    with Akinator(language=LANGUAGE, theme=THEME, child_mode=CHILD_MODE) as aki:
        game = Game(aki, strategy=ask_player)
        game.on("error", lambda err: print(f"   {err}"))

        guess = game.run()

        if guess:
            print("\nGame Over!\n")
            print(f"NAME: {guess.name}")
            print(f"DESCRIPTION: {guess.description}")
            print(f"IMAGE URL: {guess.absolute_picture_path}")
        else:
            print("\nNo guess from Akinator")


if __name__ == "__main__":
    main()
