import pytest

from philo.cli import main


@pytest.mark.parametrize("argv", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == "Error: invalid number of arguments\n"


@pytest.mark.parametrize("argv", [["-5", "800", "200", "200"],
                                  ["4", "abc", "200", "200"],
                                  ["4", "800", "0", "200"],
                                  ["4", "800", "200", "200", "x"]])
def test_invalid_values(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().out == (
        "Error: Invalid arguments - values must be positive integers\n"
    )


def test_too_many_philosophers(capsys):
    assert main(["201", "800", "200", "200"]) == 1
    assert capsys.readouterr().out == "Error: Invalid arguments - max of 200 philosophers!\n"


def test_zero_meals_rejected_silently(capsys):
    assert main(["4", "800", "200", "200", "0"]) == 1
    assert capsys.readouterr().out == ""


def test_single_philosopher_run(capsys):
    assert main(["1", "60", "10", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].endswith(" 1 has taken a fork")
    assert lines[-1].endswith(" 1 died")


def test_run_until_everyone_ate(capsys):
    assert main(["3", "600", "20", "20", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert not any(line.endswith("died") for line in lines)
    for pid in ("1", "2", "3"):
        eaten = [line for line in lines if line.split(" ", 2)[1:] == [pid, "is eating"]]
        assert len(eaten) >= 2