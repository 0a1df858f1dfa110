# src/wordheat/models.py
from dataclasses import dataclass

from colorama import Fore

@dataclass(frozen=True)
class Category:
    """Immutable frequency bucket and the ANSI color it is displayed with."""
    name: str
    color: str


RARE = Category(name="rare", color=Fore.BLUE)
COMMON = Category(name="common", color=Fore.GREEN)
FREQUENT = Category(name="frequent", color=Fore.RED)
