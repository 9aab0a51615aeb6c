"""
Akinator SDK — Game Class

Plays a whole game: opens a session, asks your strategy for an answer to
each question until Akinator is confident enough, then collects its guess.

Usage:
    from akinator_sdk import Akinator, Game

    def my_strategy(question):
        print(question.text)
        return input("> ")

    guess = Game(Akinator(), strategy=my_strategy).run()
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Union

from .client import Akinator
from .errors import CantGoBackAnyFurther, InvalidAnswer, NoMoreQuestions
from .types import Answer, Guess, Question

BACK = "back"

# Strategy function type: receives the current Question, returns an answer,
# "back" to undo the last answer, or None to stop asking.
StrategyFn = Callable[[Question], Union[Answer, int, str, None]]


class Game:
    """
    Runs one Akinator game with a strategy function.

    Args:
        client: An Akinator session (not yet started).
        strategy: Function that takes a Question and returns an answer.
        threshold: Ask for a guess once progression goes above this (default: 80.0).
        max_steps: Ask for a guess after this many questions at the latest (default: 80).
        verbose: Enable detailed logging (default: False).
    """

    def __init__(
        self,
        client: Akinator,
        strategy: StrategyFn,
        threshold: float = 80.0,
        max_steps: int = 80,
        verbose: bool = False,
    ):
        self.client = client
        self.strategy = strategy
        self.threshold = threshold
        self.max_steps = max_steps
        self.verbose = verbose

        self._running = False

        # Event callbacks
        self._callbacks: Dict[str, list] = {
            "start": [],
            "question": [],
            "answer": [],
            "back": [],
            "guess": [],
            "error": [],
            "stop": [],
        }

    # ─── Events ───────────────────────────────────────────────────────────

    def on(self, event: str, callback: Callable) -> "Game":
        """Register an event callback. Returns self for chaining."""
        if event in self._callbacks:
            self._callbacks[event].append(callback)
        return self

    def _emit(self, event: str, *args: Any) -> None:
        """Emit an event to all registered callbacks."""
        for cb in self._callbacks.get(event, []):
            try:
                cb(*args)
            except Exception as e:
                self._log(f"❌ Callback error ({event}): {e}")

    # ─── Public API ───────────────────────────────────────────────────────

    def run(self) -> Optional[Guess]:
        """Play the game to the end and return Akinator's best guess."""
        self._running = True
        self._log(f"🧞 Starting a {self.client.theme.name.lower()} game...")

        self.client.start()
        self._emit("start", self.client.current_question)

        while self._running and self._should_ask():
            question = self.client.current_question
            self._emit("question", question)
            self._log_verbose(
                f"❓ Step {question.step} ({question.progression:.1f}%): {question.text}"
            )

            decision = self.strategy(question)
            if decision is None:
                self.stop()
                break

            try:
                self._apply(decision)
            except NoMoreQuestions:
                self._log("ℹ️  Akinator has no more questions")
                break

        self._running = False
        try:
            guess = self.client.win()
        except NoMoreQuestions:
            guess = None
        self._emit("guess", guess)
        if guess:
            self._log(f"🎯 {guess.name} ({guess.description})")
        else:
            self._log("🤷 Akinator has no guess")
        return guess

    def stop(self) -> None:
        """Stop asking questions; run() then goes straight to the guess."""
        if self._running:
            self._running = False
            self._log_verbose("👋 Game stopped")
            self._emit("stop")

    # ─── Internal ─────────────────────────────────────────────────────────

    def _should_ask(self) -> bool:
        return (
            self.client.progression <= self.threshold
            and self.client.step < self.max_steps
        )

    def _apply(self, decision: Union[Answer, int, str]) -> None:
        """Send the strategy's decision to Akinator."""
        if isinstance(decision, str) and decision.strip().lower() == BACK:
            try:
                self.client.back()
                self._emit("back", self.client.current_question)
                self._log_verbose("↩️  Went back one question")
            except CantGoBackAnyFurther as e:
                self._log("⚠️  Cannot go back any further")
                self._emit("error", e)
            return

        try:
            answer = Answer.parse(decision)
        except InvalidAnswer as e:
            self._log(f"⚠️  Invalid answer: {decision!r}")
            self._emit("error", e)
            return

        self.client.answer(answer)
        self._emit("answer", answer, self.client.current_question)

    def _log(self, msg: str) -> None:
        """Print a timestamped log message."""
        ts = datetime.now().strftime("%H:%M:%S")
        print(f"[{ts}] {msg}")

    def _log_verbose(self, msg: str) -> None:
        """Print a log message only in verbose mode."""
        if self.verbose:
            self._log(msg)
