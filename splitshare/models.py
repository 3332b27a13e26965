"""Expenses, the people sharing them, and the groups that hold them."""

from dataclasses import dataclass, field

from .colors import Code
from .console import Console, capitalize


def _money(value: float) -> str:
    return f"{value:g}"


@dataclass
class SplitPerson:
    """A member of an expense and what they paid."""

    name: str
    person_cost: float = 0.0


@dataclass
class Expense:
    """A shared expense: your own share plus every other member's."""

    my_cost: float = 0.0
    total_cost: float = 0.0
    description: str = ""
    participants: list[SplitPerson] = field(default_factory=list)

    def sort_participants(self) -> None:
        """Order participants by name."""
        self.participants.sort(key=lambda person: person.name)

    @classmethod
    def prompt(cls, console: Console) -> "Expense":
        """Ask for contributions and a description, and build the expense."""
        expense = cls()
        console.write(
            "Add", Code.FG_GREEN, " names", Code.FG_DEFAULT, " of members and their ",
            Code.FG_GREEN, "contribution", Code.FG_DEFAULT, "\n\n",
        )
        console.write("Add your contribution: Rs ", Code.FG_BLUE)
        expense.my_cost = console.read_float()
        console.read_line()
        console.write(Code.FG_DEFAULT)
        expense.total_cost += expense.my_cost

        console.write(
            "\nInput ", Code.BG_RED, "'n' to stop", Code.BG_DEFAULT, " adding member\n\n"
        )
        while True:
            console.write("Name of member: ", Code.FG_BLUE)
            name = console.read_line()
            console.write(Code.FG_DEFAULT)
            if name in ("n", "N"):
                break
            console.write(
                Code.FG_BLUE, capitalize(name), "'s", Code.FG_DEFAULT,
                " contribution: Rs ", Code.FG_BLUE,
            )
            split = console.read_float()
            console.read_line()
            console.write(Code.FG_DEFAULT)
            expense.total_cost += split
            expense.participants.append(SplitPerson(name, split))

        console.write("\nAdd ", Code.FG_GREEN, "expense", Code.FG_DEFAULT, " description: ", Code.FG_BLUE)
        expense.description = console.read_line()
        console.write(Code.FG_DEFAULT)
        console.write(
            "\n", Code.BG_GREEN, Code.FG_BLACK, "Expense Added", Code.BG_DEFAULT,
            Code.FG_DEFAULT, "\n\n",
        )
        console.write("Input View to see all expense summaries\n")
        console.write("Input Add command for adding more expenses\n")
        expense.sort_participants()
        return expense


@dataclass
class Group:
    """A named list of expenses."""

    name: str
    expenses: list[Expense] = field(default_factory=list)

    def add_expense(self, console: Console) -> Expense:
        """Prompt for a new expense and record it."""
        expense = Expense.prompt(console)
        self.expenses.append(expense)
        return expense

    def view_expenses(self, console: Console) -> None:
        """Print a summary of every expense."""
        if not self.expenses:
            console.write("Add expenses for ", self.name, " to see summary here\n")
            return
        console.write("Expense: \n")
        for expense in self.expenses:
            console.write(" - Rs ", _money(expense.total_cost), " ", expense.description, "\n")
            console.write("   - You : Rs ", _money(expense.my_cost), "\n")
            for person in expense.participants:
                console.write("   - ", capitalize(person.name), ": Rs ", _money(person.person_cost), "\n")


class InvalidGroupName(ValueError):
    """Raised when a group is given a reserved name."""


@dataclass
class Groups:
    """All groups, matched by name without regard to case."""

    groups: list[Group] = field(default_factory=list)

    def _sort(self) -> None:
        self.groups.sort(key=lambda group: group.name.lower())

    def find(self, name: str) -> Group:
        """Return the group with this name, or the first group if none matches."""
        if not self.groups:
            raise KeyError(name)
        wanted = name.lower()
        return next((g for g in self.groups if g.name.lower() == wanted), self.groups[0])

    def names(self) -> list[str]:
        """Return group names in alphabetical order."""
        self._sort()
        return [group.name for group in self.groups]

    def add_group(self, console: Console) -> str:
        """Prompt for a name and create a group with it."""
        console.write(Code.FG_GREEN, "Name", Code.FG_DEFAULT, " of group: ", Code.FG_BLUE)
        name = console.read_token()
        console.write(Code.FG_DEFAULT)
        if name == "group":
            raise InvalidGroupName(name)
        name = capitalize(name)
        self.groups.append(Group(name))
        console.write(
            "\n", Code.BG_GREEN, Code.FG_BLACK, "New Group ", name, " added!",
            Code.BG_DEFAULT, Code.FG_DEFAULT, "\n\n",
        )
        console.write(
            "Input name of group to view its expenses\n"
            "Input add command for creating more groups\n"
        )
        return name

    def view_groups(self, console: Console) -> None:
        """Print the names of all groups in alphabetical order."""
        self._sort()
        if not self.groups:
            console.write("No Groups created yet\n")
            return
        console.write("Groups created: \n")
        for group in self.groups:
            console.write(" - ", capitalize(group.name), "\n")