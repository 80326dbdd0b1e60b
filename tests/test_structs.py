import dataclasses

import pytest

from rustdrill.lessons.structs import (
    ChangeColor,
    Echo,
    Move,
    Order,
    Package,
    Point,
    Quit,
    ReportCard,
    State,
    Wrapper,
    create_order_template,
)


def test_generate_numeric_report_card():
    card = ReportCard(grade=2.1, student_name="Tom Wriggle", student_age=12)
    assert card.print() == "Tom Wriggle (12) - achieved a grade of 2.1"


def test_generate_alphabetic_report_card():
    card = ReportCard(grade="A+", student_name="Gary Plotter", student_age=11)
    assert card.print() == "Gary Plotter (11) - achieved a grade of A+"


def test_your_order():
    template = create_order_template()
    your_order = dataclasses.replace(template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == template.year
    assert your_order.made_by_phone == template.made_by_phone
    assert your_order.made_by_mobile == template.made_by_mobile
    assert your_order.made_by_email == template.made_by_email
    assert your_order.item_number == template.item_number
    assert your_order.count == 1


def test_order_template_values():
    assert create_order_template() == Order("Bob", 2019, False, False, True, 123, 0)


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    assert Package("Spain", "Russia", 1200).is_international()


def test_create_local_package():
    assert not Package("Canada", "Canada", 1200).is_international()


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    cents_per_gram = 3
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000


def test_package_of_exactly_ten_grams():
    assert Package("Spain", "Spain", 10).get_fees(1) == 10


def test_match_message_call():
    state = State(
        quit=False, position=Point(0, 0), color=(0, 0, 0), message="hello world"
    )
    state.process(ChangeColor(255, 0, 255))
    state.process(Echo("Hello world!"))
    state.process(Move(Point(10, 15)))
    state.process(Quit())

    assert state.color == (255, 0, 255)
    assert state.position.x == 10
    assert state.position.y == 15
    assert state.quit is True
    assert state.message == "Hello world!"


def test_process_rejects_unknown_message():
    with pytest.raises(TypeError):
        State().process("jump")


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"