import io

import pytest

from splitshare.console import Console
from splitshare.models import Expense, Group, Groups, InvalidGroupName, SplitPerson


def make(text=""):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_prompt_builds_expense():
    console, _ = make("100\nbob\n50\nalice\n25\nn\nDinner\n")
    expense = Expense.prompt(console)
    assert expense.my_cost == 100.0
    assert expense.total_cost == 175.0
    assert expense.description == "Dinner"
    assert [p.name for p in expense.participants] == ["alice", "bob"]
    assert [p.person_cost for p in expense.participants] == [25.0, 50.0]


def test_prompt_announces_added_expense():
    console, out = make("10\nN\nTaxi\n")
    expense = Expense.prompt(console)
    assert expense.participants == []
    assert "Expense Added" in out.getvalue()
    assert "Input Add command for adding more expenses\n" in out.getvalue()


def test_sort_participants_by_name():
    expense = Expense(participants=[SplitPerson("zed", 1.0), SplitPerson("amy", 2.0)])
    expense.sort_participants()
    assert [p.name for p in expense.participants] == ["amy", "zed"]


def test_group_add_expense_records_it():
    console, _ = make("5\nn\nTea\n")
    group = Group("Family")
    expense = group.add_expense(console)
    assert group.expenses == [expense]


def test_view_expenses_empty():
    console, out = make()
    Group("Family").view_expenses(console)
    assert out.getvalue() == "Add expenses for Family to see summary here\n"


def test_view_expenses_lists_members():
    console, out = make()
    group = Group("Trip", [Expense(10.0, 30.0, "Cab", [SplitPerson("bOB", 20.0)])])
    group.view_expenses(console)
    assert out.getvalue() == "Expense: \n - Rs 30 Cab\n   - You : Rs 10\n   - Bob: Rs 20\n"


def test_add_group_capitalizes():
    console, out = make("fAMILY\n")
    groups = Groups()
    assert groups.add_group(console) == "Family"
    assert groups.names() == ["Family"]
    assert "New Group Family added!" in out.getvalue()


def test_add_group_rejects_reserved_name():
    console, _ = make("group\n")
    groups = Groups()
    with pytest.raises(InvalidGroupName):
        groups.add_group(console)
    assert groups.groups == []


def test_names_sorted_case_insensitively():
    groups = Groups([Group("Zoo"), Group("apple"), Group("Mango")])
    assert groups.names() == ["apple", "Mango", "Zoo"]


def test_find_ignores_case_and_falls_back_to_first():
    groups = Groups([Group("Work"), Group("Home")])
    assert groups.find("HOME").name == "Home"
    assert groups.find("missing").name == "Work"


def test_find_in_empty_raises():
    with pytest.raises(KeyError):
        Groups().find("any")


def test_view_groups():
    console, out = make()
    Groups().view_groups(console)
    assert out.getvalue() == "No Groups created yet\n"
    console, out = make()
    Groups([Group("b"), Group("A")]).view_groups(console)
    assert out.getvalue() == "Groups created: \n - A\n - B\n"