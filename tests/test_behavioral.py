import pytest

from demokit.behavioral import (
    Bank,
    Cash,
    Controller,
    Light,
    LightOffCommand,
    LightOnCommand,
    Numbers,
    PaymentContext,
    Reader,
    Subject,
    iterator_print,
)


def test_command(capsys):
    controller = Controller()
    controller.set_command(LightOnCommand())
    assert controller.call() == "light on"
    controller.set_command(LightOffCommand())
    assert controller.call() == "light off"
    assert capsys.readouterr().out == "light on\nlight off\n"


def test_controller_without_command_raises():
    with pytest.raises(RuntimeError):
        Controller().call()


def test_light_direct():
    assert Light().on() == "light on"
    assert Light().off() == "light off"


def test_iterator_print(capsys):
    iterator_print(Numbers(1, 10))
    assert capsys.readouterr().out.splitlines() == [str(i) for i in range(1, 11)]


def test_numbers_iterate_again_from_start():
    numbers = Numbers(3, 5)
    assert list(numbers) == [3, 4, 5]
    assert list(numbers) == [3, 4, 5]


def test_numbers_empty_when_start_after_end():
    assert list(Numbers(5, 4)) == []


def test_observer(capsys):
    subject = Subject()
    subject.attach(Reader("reader1"), Reader("reader2"))
    subject.update_context("run")
    subject.update_context("game over")
    assert subject.context == "game over"
    assert capsys.readouterr().out.splitlines() == [
        "reader1 receive run",
        "reader2 receive run",
        "reader1 receive game over",
        "reader2 receive game over",
    ]


def test_reader_update_returns_text():
    subject = Subject()
    subject.context = "news"
    assert Reader("r").update(subject) == "r receive news"


def test_strategy(capsys):
    assert PaymentContext("lin", "", 100, Cash()).pay() == "Pay $100 to lin by cash"
    assert (
        PaymentContext("zexin", "123456", 100, Bank()).pay()
        == "Pay $100 to zexin by bank account 123456"
    )
    assert capsys.readouterr().out.splitlines() == [
        "Pay $100 to lin by cash",
        "Pay $100 to zexin by bank account 123456",
    ]