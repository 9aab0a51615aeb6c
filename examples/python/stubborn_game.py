"""
🤖 Stubborn Game — Akinator vs. a scripted player

Strategy: Answers from a fixed script, then keeps saying "probably not"
once the script runs out. Shows how to hook into game events and read
every guess Akinator considered.

Usage:
    1. Optionally set AKINATOR_THEME (characters, animals, objects)
    2. pip install requests
    3. python stubborn_game.py
"""

import logging
import os
import sys

# Add SDK to path for local dev
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "sdk", "python"))

from akinator_sdk import Akinator, Answer, Game


SCRIPT = ["yes", "no", "idk", "back", "probably", "no", "yes"]


def scripted_strategy():
    """Build a strategy that replays SCRIPT, then answers 'probably not'."""
    replies = iter(SCRIPT)

    def strategy(question):
        return next(replies, Answer.PROBABLY_NOT)

    return strategy


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    aki = Akinator(theme=os.environ.get("AKINATOR_THEME", "characters"))
    game = Game(aki, strategy=scripted_strategy(), threshold=85.0, max_steps=40, verbose=True)

    # Events
    game.on("answer", lambda answer, q: print(f"   answered {answer.name.lower()} -> {q.progression:.1f}%"))
    game.on("back", lambda q: print(f"   back to step {q.step}"))

    try:
        guess = game.run()
    finally:
        aki.close()

    if guess:
        print(f"\n🎯 Akinator thinks it's {guess.name}")
    for rank, candidate in enumerate(aki.guesses[1:], start=2):
        print(f"   #{rank} {candidate.name} — {candidate.description}")


if __name__ == "__main__":
    main()
