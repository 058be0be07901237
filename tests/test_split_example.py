# tests/test_split_example.py
from engine.splitter import BasketSplitter


def _largest(grouping):
    return max(len(v) for v in grouping.values())


def test_two_methods_for_apple_milk_bread():
    cfg = {
        "Apple": ["Courier", "Express"],
        "Milk": ["Express"],
        "Bread": ["Courier"],
    }
    groups = BasketSplitter(cfg).split(["Apple", "Milk", "Bread"])

    assert len(groups) == 2
    assert _largest(groups) == 2
    assert sorted(i for items in groups.values() for i in items) == ["Apple", "Bread", "Milk"]
    assert groups["Express"] == ["Milk"] or groups["Courier"] == ["Bread"]


def test_largest_group_is_maximised():
    cfg = {
        "Cocoa Butter": ["Parcel locker", "Courier", "Same day delivery"],
        "Garden Chair": ["Courier"],
        "Espresso Machine": ["Courier", "Express Delivery", "Pick-up point"],
        "Steak (300g)": ["Express Delivery", "Same day delivery"],
        "Cold Beer (330ml)": ["Express Delivery", "In-store pick-up"],
        "Carrots (1kg)": ["Express Delivery", "In-store pick-up"],
        "AA Battery (4 Pcs.)": ["Express Delivery", "Courier", "Parcel locker"],
    }
    basket = [
        "Espresso Machine", "Steak (300g)", "Cold Beer (330ml)",
        "AA Battery (4 Pcs.)", "Garden Chair", "Carrots (1kg)",
    ]
    groups = BasketSplitter(cfg).split(basket)

    # Courier must carry the chair; Express can take everything else
    assert groups == {
        "Express Delivery": [
            "Espresso Machine", "Steak (300g)", "Cold Beer (330ml)",
            "AA Battery (4 Pcs.)", "Carrots (1kg)",
        ],
        "Courier": ["Garden Chair"],
    }


def test_empty_basket_gives_empty_grouping():
    splitter = BasketSplitter({"Apple": ["Courier"]})
    assert splitter.split([]) == {}


def test_duplicates_are_separate_entries():
    cfg = {
        "Tea": ["Mailbox", "Locker"],
        "Chair": ["Courier", "Locker"],
        "Lamp": ["Courier"],
    }
    basket = ["Tea", "Tea", "Chair", "Tea", "Lamp"]
    groups = BasketSplitter(cfg).split(basket)

    assert sorted(i for items in groups.values() for i in items) == sorted(basket)
    # {Locker: Tea x3 + Chair, Courier: Lamp} beats {Mailbox: Tea x3, Courier: Chair + Lamp}
    assert groups == {"Locker": ["Tea", "Tea", "Chair", "Tea"], "Courier": ["Lamp"]}


def test_basket_is_not_mutated():
    cfg = {"A": ["X", "Y"], "B": ["Y"], "C": ["X"]}
    basket = ["C", "A", "B"]
    BasketSplitter(cfg).split(basket)
    assert basket == ["C", "A", "B"]


def test_repeated_calls_return_same_grouping():
    cfg = {
        "A": ["X", "Y"],
        "B": ["Y", "Z"],
        "C": ["Z"],
        "D": ["X", "Z"],
    }
    splitter = BasketSplitter(cfg)
    first = splitter.split(["A", "B", "C", "D"])
    for _ in range(5):
        assert splitter.split(["A", "B", "C", "D"]) == first


def test_single_item_single_method():
    groups = BasketSplitter({"Bread": ["Courier"]}).split(["Bread"])
    assert groups == {"Courier": ["Bread"]}
