"""Guess-the-number game with three difficulty levels."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass, field
from enum import Enum, IntEnum

LOWEST = 1
HIGHEST = 100


class Difficulty(IntEnum):
    """Difficulty levels, numbered as offered in the menu."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def choices(self) -> int:
        """Number of guesses allowed at this level."""
        return _CHOICES[self]


_CHOICES = {Difficulty.EASY: 10, Difficulty.MEDIUM: 7, Difficulty.HARD: 5}


class GuessResult(Enum):
    CORRECT = "correct"
    TOO_HIGH = "too high"
    TOO_LOW = "too low"


@dataclass
class GuessingGame:
    """One round: a secret number and a limited number of guesses."""

    secret: int
    difficulty: Difficulty
    choices_left: int = field(init=False)
    won: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        self.difficulty = Difficulty(self.difficulty)
        self.choices_left = self.difficulty.choices

    @property
    def over(self) -> bool:
        return self.won or self.choices_left == 0

    def guess(self, number: int) -> GuessResult:
        """Check a guess; a wrong guess uses up one choice."""
        if self.over:
            raise RuntimeError("the game is over")
        if number == self.secret:
            self.won = True
            return GuessResult.CORRECT
        self.choices_left -= 1
        return GuessResult.TOO_HIGH if number > self.secret else GuessResult.TOO_LOW


def new_secret(rng: random.Random | None = None) -> int:
    """Pick a secret number between 1 and 100 inclusive."""
    rng = rng or random.Random()
    return rng.randint(LOWEST, HIGHEST)


def _read_int(prompt: str) -> int:
    """Prompt until an integer is entered; EOFError propagates."""
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number.")


def _play_round(game: GuessingGame) -> None:
    print(
        f"\nYou have {game.difficulty.choices} choices for finding the "
        f"secret number between {LOWEST} and {HIGHEST}."
    )
    while not game.over:
        number = _read_int("\n\nEnter the number: ")
        result = game.guess(number)
        if result is GuessResult.CORRECT:
            print(f"Well played! You won, {number} is the secret number")
            print("\t\t\t Thanks for playing....")
            print("Play the game again with us!!\n\n")
            return
        print(f"Nope, {number} is not the right number")
        if result is GuessResult.TOO_HIGH:
            print("The secret number is smaller than the number you have chosen")
        else:
            print("The secret number is greater than the number you have chosen")
        print(f"{game.choices_left} choices left. ")
        if game.choices_left == 0:
            print(
                f"You couldn't find the secret number, it was {game.secret}, You lose!!\n\n"
            )
            print("Play the game again to win!!!\n\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Guess the secret number.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the secret numbers")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("\n\t\t\tWelcome to GuessTheNumber game!")
    print(
        f"You have to guess a number between {LOWEST} and {HIGHEST}. "
        "You'll have limited choices based on the level you choose. Good Luck!"
    )

    try:
        while True:
            print("\nEnter the difficulty level: ")
            print("1 for easy!\t2 for medium!\t3 for difficult!\t0 for ending the game!\n")
            choice = _read_int("Enter the number: ")
            secret = new_secret(rng)
            if choice == 0:
                return 0
            try:
                difficulty = Difficulty(choice)
            except ValueError:
                print("Wrong choice, Enter valid choice to play the game! (0,1,2,3)")
                continue
            _play_round(GuessingGame(secret, difficulty))
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())