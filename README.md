# consoledrills

A collection of small interactive terminal programs: a 2048 puzzle, a banking
menu, rock-paper-scissors, a number guessing game, a shopping receipt and a
handful of everyday calculators. The logic behind each one can also be
imported and used on its own.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

| Command           | What it does                                               |
|-------------------|------------------------------------------------------------|
| `drill-2048`      | Play 2048 on a 4×4 board: `w`/`a`/`s`/`d` to slide, `q` to quit. With `--echo`, only echo the movement keys pressed until `q` |
| `drill-bank`      | Banking menu starting at 1000: check balance, deposit, withdraw, exit |
| `drill-rps`       | One round of rock-paper-scissors against the computer      |
| `drill-circle`    | Area and circumference of a circle, surface area and volume of a sphere |
| `drill-interest`  | Compound interest, compounded four times a year            |
| `drill-weight`    | Convert kilograms to pounds or pounds to kilograms (2.205 lb per kg) |
| `drill-guess`     | Guess a secret number from 0 to 99 until you get it right  |
| `drill-rng`       | Print a random number from 0 to 99                         |
| `drill-cart`      | Price a purchase and print a receipt                       |
| `drill-exercises` | Run the matrix, array, weekday, maths and arithmetic exercises; name one of `arithmetic`, `arrays`, `day`, `math`, `matrix`, `names`, `numbers` to run just that one |

On a POSIX terminal `drill-2048` reads each key as it is pressed; otherwise it
reads characters from standard input, which also makes it scriptable:
`printf 'wasdq' | drill-2048`.

## Using the library

### 2048 (`consoledrills.board`, `consoledrills.game`)

```python
import random
from consoledrills.board import make_board, add_random_tile, move_left, can_move, draw_board

board = make_board(4)
rng = random.Random(1)
add_random_tile(board, rng)
add_random_tile(board, rng)

if move_left(board):          # True when the slide changed the board
    add_random_tile(board, rng)
print(draw_board(board))      # text, empty cells shown as dots
print("game over" if not can_move(board) else "keep going")
```

`move_right`, `move_up` and `move_down` work the same way. Equal neighbouring
tiles merge once per move. `add_random_tile` places a 2 (a 4 one time in ten)
on a random empty cell and returns its position, or `None` when the board is
full; `is_full` tells whether any empty cell remains.

`consoledrills.game.play(keys, rng, out)` drives a whole game from a sequence
of keys and returns the final board; `apply_key(board, key)` applies a single
key, and `read_key()` reads one key from the terminal.

### Banking (`consoledrills.banking`)

```python
from consoledrills.banking import Account, InsufficientFunds, InvalidAmount

account = Account()           # starts with a balance of 1000.0
account.deposit(250.0)
try:
    account.withdraw(5000.0)
except InsufficientFunds:
    print("not enough money")
```

A negative withdrawal raises `InvalidAmount`. `run(lines, out)` drives the
whole menu from lines of input and returns the account.

### Rock-paper-scissors (`consoledrills.rps`)

```python
from consoledrills.rps import Choice, decide

print(decide(Choice.ROCK, Choice.SCISSORS).value)   # "You win!"
```

`computer_choice(rng)` draws from the half-open range `[ROCK, SCISSORS)`, so
the computer plays only rock or paper. `prompt_choice(lines, out)` repeats the
menu until a valid choice is entered.

### Calculators (`consoledrills.calculators`)

```python
from consoledrills.calculators import circle_metrics, compound_interest, kg_to_lbs, lbs_to_kg

metrics = circle_metrics(2.0)
print(metrics.area, metrics.circumference, metrics.surface_area, metrics.volume)
print(compound_interest(1000.0, 5.0, 10, 4))
print(kg_to_lbs(70.0), lbs_to_kg(154.35))
```

Pi is taken as 3.14159.

### Guessing (`consoledrills.guessing`)

`random_number(rng, low, high)` returns an integer in `[low, high)`.
`guessing_game(secret, guesses, out)` returns how many guesses it took, or
`None` if the guesses ran out.

### Shopping and word prompts (`consoledrills.shopping`)

```python
from consoledrills.shopping import cart_total, receipt

print(cart_total(2.5, 4))
print(receipt("apples", 2.5, 4))
```

`collect_words(lines, out)` prompts for three adjectives, a noun and a verb and
returns them in a dict keyed `adjective1`, `noun`, `adjective2`, `verb`,
`adjective3`.

### Exercises (`consoledrills.exercises`)

`format_matrix`, `day_of_week`, `math_demo`, `arithmetic` (integer division
truncating toward zero), `read_numbers` and `read_names`.

## What it does not do

- There is no mad-libs story: `collect_words` only gathers the words, and no
  command uses it.
- The 2048 game keeps no score and has no win condition; it ends on `q`, at
  the end of input, or when no move is left.