# consolekit

Five small interactive console programs. Each one can be run as a command or
used as a Python module.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

| Command                | What it does |
|------------------------|--------------|
| `consolekit-calc`      | Reads two numbers and an operator (`+`, `-`, `*`, `/`) and prints the result. The three values may also be given as arguments: `consolekit-calc 6 3 /` |
| `consolekit-grade`     | Reads marks for five subjects and prints the grade for their average. Marks may also be given as arguments. |
| `consolekit-wordcount` | Counts the whitespace-separated words in a file. The file name is taken as an argument or asked for. |
| `consolekit-guess`     | A game where you guess a number from 1 to 100, at easy, medium or difficult level. `--seed N` makes the numbers repeatable. |
| `consolekit-movies`    | A menu for booking movie tickets and registering a loyalty card. `--card-file PATH` sets the file for card registrations (default `card.dat`), and `--seed N` makes card numbers repeatable. |

When input runs out, the interactive commands stop without an error.

## Library use

```python
from consolekit.calculator import Calculator, calculate
from consolekit.grading import grade, grade_for_average
from consolekit.wordcount import count_words, count_words_in_file

Calculator().divide(9, 3)             # 3.0
calculate(2, 3, "*")                  # 6
grade([95, 92, 90, 99, 94])           # "A1"
grade_for_average(35)                 # "D"
count_words(["one two", "  three "])  # 3
```

`Calculator.divide` raises `ValueError` when it is asked to divide by zero.
`calculate` raises `ValueError` for an unknown operator as well.
`grade_for_average` raises `ValueError` when an average falls outside 0–100,
and `grade` raises it when it gets no marks.

### Number guessing

```python
import random
from consolekit.guessing import Difficulty, GuessingGame, GuessResult, new_secret

game = GuessingGame(new_secret(random.Random(1)), Difficulty.EASY)
result = game.guess(50)   # GuessResult.CORRECT, TOO_HIGH or TOO_LOW
game.choices_left         # guesses still allowed
game.over                 # True once the game is won or no guesses are left
```

The easy level allows 10 guesses, medium allows 7 and difficult allows 5.
A wrong guess takes away one of them. If you call `guess` after the game is
over, it raises `RuntimeError`.

### Movie booking

```python
from datetime import date
from consolekit.moviebooking import (
    Card, SeatClass, expiry_valid, format_card_record,
    generate_card_number, register_card, show_times, ticket_price,
)

show_times(2)                            # ("0900", "1100", "1250", "1500", "2000", "2200")
ticket_price(2, SeatClass.NORMAL)        # 800
ticket_price(2, SeatClass.GOLD, True)    # 1260, i.e. 10% off with a registered card
expiry_valid(5, 2030, date(2025, 1, 1))  # True

card = Card("Ann", "contact", "1 Main St", "ann@example.com", generate_card_number())
register_card("card.dat", card)          # appends format_card_record(card) to the file
```

A normal seat costs 400 per ticket and a gold seat costs 700. Card numbers run
from 4000000 to 4399999. At the counter the discount is given when the card
number you enter is one of those in the card file.

## What it does not do

The movie booking program takes no payment. It asks for the card holder's
name, the card number, the expiry date and the CVV, and it checks only the
expiry date. Nothing else you enter is checked or stored. Prebooked tickets
cannot be looked up, so that menu option always reports that it found no
booking. The only thing saved is the card registration file.