import pytest

from kernelsim.modules import cpu_main, io_main, memoria_main


@pytest.mark.parametrize(
    "entry, name",
    [(cpu_main, "cpu"), (io_main, "io"), (memoria_main, "memoria")],
)
def test_entry_points_greet_and_succeed(entry, name, capsys):
    assert entry([]) == 0
    assert capsys.readouterr().out == f"Hola desde {name}!!\n"


@pytest.mark.parametrize("entry", [cpu_main, io_main, memoria_main])
def test_entry_points_reject_unknown_arguments(entry):
    with pytest.raises(SystemExit) as info:
        entry(["--bogus"])
    assert info.value.code == 2