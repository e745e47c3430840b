import pytest

from festive_solvers.day03 import max_joltage, main, solve

BANKS = [
    "987654321111111",
    "811111111111119",
    "234234234234278",
    "818181911112111",
]
EXAMPLE = "\n".join(BANKS) + "\n"


def _is_subsequence(small, big):
    remaining = iter(big)
    return all(ch in remaining for ch in small)


def test_descending_bank_keeps_its_prefix():
    bank = BANKS[0]
    assert max_joltage(bank) == int(bank[:12])


def test_two_battery_joltage():
    assert max_joltage(BANKS[0], 2) == 98


def test_worked_example_total():
    assert solve(EXAMPLE) == 3121910778619


@pytest.mark.parametrize("bank", BANKS)
def test_result_is_an_ordered_pick(bank):
    result = str(max_joltage(bank))
    assert len(result) == 12
    assert _is_subsequence(result, bank)


@pytest.mark.parametrize("bank", BANKS)
def test_more_batteries_never_lower_leading_digit(bank):
    assert str(max_joltage(bank, 12))[0] <= str(max_joltage(bank, 2))[0]


def test_uniform_bank():
    bank = "5" * 15
    assert max_joltage(bank) == int("5" * 12)


def test_bank_too_short():
    with pytest.raises(ValueError):
        max_joltage("12345")


def test_bank_of_zeros():
    with pytest.raises(ValueError):
        max_joltage("0" * 14)


def test_main_prints_each_bank_and_total(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE, encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.split()
    assert lines[:4] == [str(max_joltage(bank)) for bank in BANKS]
    assert lines[4] == str(solve(EXAMPLE))