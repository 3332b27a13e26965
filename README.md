# splitshare

A small interactive terminal program for keeping track of shared expenses.
You create named groups (for example *Family* or *Trip*), and inside each
group you record expenses: your own contribution, each member's
contribution and a short description.

## Installation

```
pip install .
```

## Usage

Start the program:

```
splitshare
```

You begin in the **Splitwise** menu. Commands are single words and
case-insensitive:

| Command     | Where        | Effect                                     |
|-------------|--------------|--------------------------------------------|
| `add`       | main menu    | Create a new group                         |
| `view`      | main menu    | List groups, sorted alphabetically         |
| `<name>`    | main menu    | Enter the group with that name             |
| `add`       | inside group | Record a new expense                       |
| `view`      | inside group | Show every expense and its contributions   |
| `splitwise` | inside group | Return to the main menu                    |
| `help`      | anywhere     | Show where you are and what you can do     |
| `exit`      | anywhere     | Leave the program                          |

Anything else prints `Wrong Command!!`. The program also ends quietly when
its input runs out.

Group names are a single word and are stored capitalised (`trip` becomes
`Trip`). The name `group` is rejected with a request to choose a different
name.

When adding an expense, you first enter your own contribution, then one
member at a time: a name followed by that member's contribution. Enter `n`
(or `N`) as the name to stop adding members, then type a description. The
total of the expense is the sum of all contributions, and members are listed
in order of name. If a contribution is not a number, an error message is
shown and the expense is not recorded.

### Example session

```
Splitwise> add
Name of group: trip
New Group Trip added!
Splitwise> trip
Trip> add
Add your contribution: Rs 100
Name of member: alice
Alice's contribution: Rs 50
Name of member: n
Add expense description: dinner
Expense Added
Trip> view
Expense:
 - Rs 150 dinner
   - You : Rs 100
   - Alice: Rs 50
Trip> exit
```

## Using it from Python

The command loop reads from and writes to a `splitshare.console.Console`,
which by default wraps standard input and output but accepts any text
streams:

```python
import io
from splitshare.console import Console
from splitshare.cli import run

out = io.StringIO()
run(Console(io.StringIO("add\ntrip\nview\nexit\n"), out))
print(out.getvalue())
```

`splitshare.states.Session` holds the menu state and the groups
(`splitshare.models.Groups`, `Group`, `Expense`, `SplitPerson`).

## What it does not do

- Nothing is saved: groups and expenses exist only for the running session.
- It records who paid what, but does not work out balances or who owes whom.
- Expenses cannot be edited or deleted, and groups cannot be renamed or removed.

## Running the tests

```
pip install .[test]
pytest
```