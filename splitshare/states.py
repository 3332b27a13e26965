"""The menu state machine: the main menu and the inside of one group."""

from .console import Console
from .models import Groups, InvalidGroupName

SPLITWISE = "splitwise"
GROUP = "group"
ACTIONS = ("Add", "View")


class Session:
    """Tracks which menu is active and dispatches commands to it."""

    def __init__(self) -> None:
        self.groups = Groups()
        self.state = SPLITWISE
        self.list_item = ""

    def state_name(self) -> str:
        """Name shown in the prompt: the group's name inside a group."""
        return self.list_item if self.state == GROUP else self.state

    def next_viable_states(self) -> list[str]:
        """States reachable from the current one."""
        return [GROUP] if self.state == SPLITWISE else [SPLITWISE]

    def actions_available(self) -> list[str]:
        """Actions offered in the current state."""
        return list(ACTIONS)

    def change_state_to(self, next_state: str) -> bool:
        """Switch state if allowed; report whether it happened."""
        if next_state not in self.next_viable_states():
            return False
        self.state = next_state
        return True

    def do_action(self, action: str, console: Console) -> bool:
        """Run an action in the current state; report whether one ran."""
        action = action.lower()
        add, view = (name.lower() for name in self.actions_available())
        if self.state == SPLITWISE:
            if action == add:
                try:
                    self.groups.add_group(console)
                except InvalidGroupName:
                    console.write("\uf256 Please choose a different name! \n")
                    return False
                return True
            if action == view:
                self.groups.view_groups(console)
                return True
        elif self.state == GROUP:
            if action == add:
                self.groups.find(self.list_item).add_expense(console)
                return True
            if action == view:
                self.groups.find(self.list_item).view_expenses(console)
                return True
        return False

    def move_to_list(self, item: str) -> bool:
        """Enter the named group from the main menu."""
        item = item.lower()
        if self.state != SPLITWISE:
            return False
        if item not in (name.lower() for name in self.groups.names()):
            return False
        if not self.change_state_to(GROUP):
            return False
        self.list_item = item
        return True