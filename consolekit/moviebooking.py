"""Movie ticket booking at a cinema counter, with loyalty card registration."""

from __future__ import annotations

import argparse
import getpass
import random
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date
from enum import IntEnum
from pathlib import Path

DEFAULT_CARD_FILE = "card.dat"

MOVIES = (
    "Avengers: Infinity War",
    "Antman And The Wasp",
    "Deadpool 2",
    "Venom",
    "Captain Marvel",
)

_STANDARD_TIMES = ("0800", "1300", "1450", "1800", "2100", "0100")
_ALTERNATE_TIMES = ("0900", "1100", "1250", "1500", "2000", "2200")
_SHOW_TIMES = {
    1: _STANDARD_TIMES,
    2: _ALTERNATE_TIMES,
    3: _STANDARD_TIMES,
    4: _STANDARD_TIMES,
    5: _STANDARD_TIMES,
}

CARD_NUMBER_BASE = 4000000
CARD_NUMBER_SPAN = 400000
CARD_DISCOUNT_PERCENT = 10

_INDENT = "\t\t\t\t"

_MENU_OPTIONS = (
    "Movie Timings",
    "Recieving Ticket",
    "For Information",
    "DTCard Registration",
    "Exit",
)


class SeatClass(IntEnum):
    """Seating classes, numbered as offered at the counter."""

    NORMAL = 1
    GOLD = 2

    @property
    def price(self) -> int:
        """Price of one ticket in this class."""
        return _PRICES[self]

    @property
    def label(self) -> str:
        return "Normal Class" if self is SeatClass.NORMAL else "Gold Class"


_PRICES = {SeatClass.NORMAL: 400, SeatClass.GOLD: 700}


@dataclass
class Ticket:
    """A booked ticket as printed for the customer."""

    name: str
    contact: str
    show_time: str


@dataclass
class Card:
    """A loyalty card registration."""

    name: str
    contact: str
    address: str
    email: str
    number: int


def show_times(movie: int) -> tuple[str, ...]:
    """Return the show times offered for the movie numbered 1 to 5."""
    try:
        return _SHOW_TIMES[movie]
    except KeyError:
        raise ValueError(f"no such movie: {movie}") from None


def ticket_price(count: int, seat_class: SeatClass | int, discount: bool = False) -> int:
    """Return the amount to pay for ``count`` tickets, less 10% with a valid card."""
    if count < 0:
        raise ValueError(f"ticket count must not be negative: {count}")
    amount = count * SeatClass(seat_class).price
    if discount:
        amount = amount * (100 - CARD_DISCOUNT_PERCENT) // 100
    return amount


def generate_card_number(rng: random.Random | None = None) -> int:
    """Return a new card number between 4000000 and 4399999."""
    rng = rng or random.Random()
    return CARD_NUMBER_BASE + rng.randrange(CARD_NUMBER_SPAN)


def format_card_record(card: Card) -> str:
    """Return the text stored in the card file for one registration."""
    return (
        f"\n Name :{card.name}\n"
        f"\n Mobile No. :{card.contact}\n"
        f"\n Address :{card.address}\n"
        f"\n Mail ID :{card.email}\n"
        f"\nCard Number:{card.number}"
    )


def register_card(path: str | Path, card: Card) -> None:
    """Append the card's record to the card file."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(format_card_record(card))


def expiry_valid(month: int, year: int, today: date | None = None) -> bool:
    """Check an expiry date the way the counter does: year not past, month not behind."""
    today = today or date.today()
    current_month_index = today.month - 1
    return month >= current_month_index and year >= today.year


def _registered_numbers(path: str | Path) -> set[int]:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        return set()
    numbers = set()
    for line in text.splitlines():
        key, found, value = line.partition("Card Number:")
        if found and not key.strip():
            try:
                numbers.add(int(value.strip()))
            except ValueError:
                continue
    return numbers


def _read_int(prompt: str) -> int:
    while True:
        text = input(prompt)
        try:
            return int(text.strip())
        except ValueError:
            print("Please enter a whole number.")


def _read_word(prompt: str) -> str:
    while True:
        words = input(prompt).split()
        if words:
            return words[0]


def _yes(prompt: str) -> bool:
    return input(prompt).strip()[:1] == "y"


def _print_clock() -> None:
    now = time.localtime()
    print("Time of the computer presently:", end="")
    print(f"seconds= {now.tm_sec}")
    print(f"minutes = {now.tm_min}")
    print(f"hours = {now.tm_hour}")
    print(f"day of month = {now.tm_mday}")
    print(f"month of year = {now.tm_mon - 1}")
    print(f"year = {now.tm_year}")
    print(f"weekday = {(now.tm_wday + 1) % 7}")
    print(f"day of year = {now.tm_yday - 1}")
    print(f"daylight savings = {max(now.tm_isdst, 0)}")


def _take_card_payment(today: date, read_secret: Callable[[str], str]) -> None:
    input(f"{_INDENT}Name of the card holder: ")
    input(f"\n{_INDENT}Enter the card number: ")
    month = _read_int(f"{_INDENT}Expiry(MM/YYYY) ")
    year = _read_int(f"{_INDENT}/")
    while not expiry_valid(month, year, today):
        if month <= today.month - 1:
            month = _read_int(f"{_INDENT}Enter the month again: ")
        if year < today.year:
            year = _read_int(f"{_INDENT}Please enter a valid year: ")
    read_secret(f"{_INDENT}Enter the CVV/CVV2: ")


def _pay(count: int, card_file: Path, read_secret: Callable[[str], str]) -> int:
    print(
        "\t\tThank you for selecting the show. Now we request you to select your "
        f"type of seating \n\n{_INDENT} 1.Normal Class \n{_INDENT} OR \n{_INDENT} 2. Gold Class"
    )
    seat_class = SeatClass.NORMAL if _read_int("") == 1 else SeatClass.GOLD
    print(f"\n\n{_INDENT}You selected for the {seat_class.label} \n")
    input("Press Enter to continue . . .")

    discount = False
    if _yes(f"\n\n{_INDENT} Do you have DTcard(y/n): "):
        card_number = _read_int(f"\n{_INDENT}Enter the card number: ")
        discount = card_number in _registered_numbers(card_file)

    amount = ticket_price(count, seat_class, discount)
    by_card = input(f"\n{_INDENT}Want to pay by Card(y/n): ").strip()[:1] in ("y", "Y")
    print(f"\n{_INDENT}Paying :{amount}")
    if by_card:
        _take_card_payment(date.today(), read_secret)
    return amount


def _book(card_file: Path, read_secret: Callable[[str], str]) -> bool:
    print(f"\n\n{_INDENT}The Shows are :")
    for number, title in enumerate(MOVIES, start=1):
        print(f"\n{_INDENT} {number}. {title}")
    movie = _read_int(f"\n{_INDENT}Enter Your Choice :\t")
    try:
        times = show_times(movie)
    except ValueError:
        print(f"\n{_INDENT} No such show.")
        return True

    print(f"\n\n{_INDENT} Select the the timings: ")
    for number, show_time in enumerate(times, start=1):
        print(f"{_INDENT} {number}. {show_time}")
    timing = _read_int(f"\n{_INDENT} Please select the timings: ")
    name = _read_word(f"\n{_INDENT} Enter your name: ")
    contact = _read_word(f"\n{_INDENT} Enter your contact number: ")
    count = _read_int(f"\n{_INDENT} Enter the number of tickets you want to purchase: ")
    _pay(count, card_file, read_secret)

    ticket = Ticket(name, contact, times[timing - 1] if 1 <= timing <= len(times) else "")
    print(f"\n\n{_INDENT} Your ticket is here: ")
    print(f"{_INDENT} Name \t\t:{ticket.name}")
    print(f"{_INDENT} Contact No\t:{ticket.contact}")
    print(f"{_INDENT} Show timings \t:{ticket.show_time}")
    return _yes(f"\n{_INDENT} Do you want to choose another option(y/n)")


def _prebooked() -> bool:
    print(
        "\n\nThank you for booking the tickets online \n To print out the tickets "
        "please enter your transaction ID in the portal"
    )
    _read_int("\n Enter your transaction id\n (Eg.last five digits of the transaction id) ")
    _read_word("Enter your name")
    print(
        "Sorry to say that but you will need to get the print out of the booking "
        "because our database shows no booking by this name"
    )
    return _yes("\n Do you want to choose another option(y/n)")


def _information() -> bool:
    print(
        "For further information about movies you can download our Application "
        "or contact us at the cinema counter"
    )
    return _yes("\n Do you want to choose another option(y/n)")


def _register(card_file: Path, rng: random.Random) -> bool:
    print("Good Morning/Evening \n Welcome to start a new journey with our cinemas ")
    print(f"{_INDENT}Welcome to register for card facility in our cinemas")
    name = _read_word(f" \n{_INDENT} Enter your name: ")
    contact = _read_word(f"{_INDENT}Enter your mobile number: ")
    address = input(f"{_INDENT}Enter the address: ")
    email = input(f"{_INDENT}Enter the mail id: ")
    card = Card(name, contact, address, email, generate_card_number(rng))
    print(f"{_INDENT}Your new card number is - :\t{card.number}")
    register_card(card_file, card)
    print(f"{_INDENT}Thank you for the registration for the card. ")
    print(
        "Thankyou. \n It will take us a week for completing your registration for the "
        "card. \n Please see the benefits of the card on the next page. -->"
    )
    if _yes("\n For selecting the page to go to benefits say (y/n)\n"):
        print(
            "Thank you for registration once again \n The privileges provided with "
            "this card are as follows:"
        )
        print(
            "\n 1. For every purchase of a movie ticket you get 25 points(1point = 1Rs.) "
            "so after 16 movies you get a free movie ticket."
        )
        print("\n 2. You are provided with regular updates regarding the movie and the showtimings.")
        print(
            "\n 3. Anytime prebook tickets for the upcoming movie and preferred seats "
            "will be provided."
        )
    return _yes("\n Do you want to choose another option(y/n)")


def _menu_text() -> str:
    rule = "\t\t\t ----------------------------------"
    lines = [
        "\n" + rule,
        "\t\t\t Simple Movie Ticket Booking System",
        rule,
        f"{_INDENT} Welcome Customer!",
    ]
    for number, option in enumerate(_MENU_OPTIONS, start=1):
        prefix = "\n" if number == 1 else ""
        lines.append(f"{prefix}{_INDENT} <{number}> {option}")
    lines[-1] += " \n"
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Book movie tickets at the counter.")
    parser.add_argument(
        "--card-file", default=DEFAULT_CARD_FILE, help="file holding card registrations"
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for card numbers")
    args = parser.parse_args(argv)
    card_file = Path(args.card_file)
    rng = random.Random(args.seed)

    _print_clock()
    try:
        again = True
        while again:
            print(_menu_text())
            choice = _read_int(f"{_INDENT}Enter Your Choice :\t")
            if choice == 1:
                again = _book(card_file, getpass.getpass)
            elif choice == 2:
                again = _prebooked()
            elif choice == 3:
                again = _information()
            elif choice == 4:
                again = _register(card_file, rng)
            elif choice == 5:
                print(f"\n{_INDENT}Thank you for visiting.\n")
                input("Press Enter to continue . . .")
                return 0
            else:
                print(f"{_INDENT}Invalid choice.")
    except EOFError:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())