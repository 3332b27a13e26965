"""Interactive expense-sharing command loop."""

from typing import Optional, Sequence

from .colors import Code
from .console import Console, capitalize
from .models import _money
from .states import SPLITWISE, Session

MAIN_HELP = (
    "Welcome to expense sharing application\n"
    "You can add groups for managing expenses\n"
    "When in doubt, input 'help' for instructions on how to proceed\n"
)
GROUPS_COMMANDS = (
    " - Add: Make new groups\n"
    " - View: List groups\n"
    " - Exit: Leave the application\n"
)
FIRST_GROUP = "Manage group expense here\n"
GROUP_COMMANDS = (
    " - Add: Make new expense\n"
    " - View: List expenses\n"
    " - Splitwise: Go back to main menu\n"
    " - Exit: Leave the application\n"
)


def _show_help(session: Session, console: Console) -> None:
    console.write("Currently in ", Code.FG_RED, capitalize(session.state_name()), Code.FG_DEFAULT, " menue.\n\n")
    if session.state == SPLITWISE:
        if session.groups.groups:
            console.write("Groups available: \n")
            for group in session.groups.groups:
                console.write(" - ", capitalize(group.name), "\n")
        else:
            console.write("You can add groups for managing expenses\n")
        console.write("\nCommands available: \n", GROUPS_COMMANDS, "\n")
        return

    console.write("Go back: \n - Groups\n\n")
    group = session.groups.find(session.state_name())
    if group.expenses:
        console.write("Expense: \n")
        for expense in group.expenses:
            console.write(" - Rs ", _money(expense.total_cost), " ", expense.description, "\n")
            console.write("   - You: Rs ", _money(expense.my_cost), "\n")
            for person in expense.participants:
                console.write("   - ", capitalize(person.name), ": Rs ", _money(person.person_cost), "\n")
    else:
        console.write("Manage ", Code.FG_RED, group.name, Code.FG_DEFAULT, " expense here\n")
    console.write("\nCommands available: \n", GROUP_COMMANDS, "\n")


def _dispatch(command: str, session: Session, console: Console) -> None:
    if session.change_state_to(command) or session.do_action(command, console):
        return
    if session.move_to_list(command):
        console.write(FIRST_GROUP, "\nCommands available: \n", GROUP_COMMANDS, "\n")
        return
    console.write(Code.BG_RED, Code.BLINK, "Wrong Command!!", Code.BG_DEFAULT, Code.RST_BLINK, "\n")


def run(console: Console) -> None:
    """Run the command loop until 'exit' or end of input."""
    session = Session()
    console.write(MAIN_HELP, "\n")
    console.write("Currently in ", Code.FG_RED, capitalize(session.state_name()), Code.FG_DEFAULT, " menu.\n\n")
    console.write("Commands available: \n", GROUPS_COMMANDS, "\n")
    try:
        while True:
            console.write(Code.FG_RED, capitalize(session.state_name()), "> ", Code.FG_DEFAULT)
            command = console.read_token().lower()
            if command == "help":
                _show_help(session, console)
            elif command == "exit":
                console.write("Thank You\nGood Bye!!")
                return
            else:
                try:
                    _dispatch(command, session, console)
                except ValueError as error:
                    console.write(Code.FG_DEFAULT, str(error), "\n")
    except EOFError:
        return


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive session on standard input and output."""
    run(Console())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())