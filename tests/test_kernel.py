import pytest

from kernelsim.configs import Config
from kernelsim.kernel import PCB, KernelConfig, main, read_kernel_config

VALUES = {
    "IP_MEMORIA": "127.0.0.1",
    "PUERTO_MEMORIA": "8002",
    "PUERTO_ESCUCHA_DISPATCH": "8001",
    "PUERTO_ESCUCHA_INTERRUPT": "8004",
    "PUERTO_ESCUCHA_IO": "8003",
    "ALGORITMO_PLANIFICACION": "FIFO",
    "TIEMPO_SUSPENSION": "4500",
    "LOG_LEVEL": "TRACE",
}


def _write(path):
    path.write_text("".join(f"{k}={v}\n" for k, v in VALUES.items()), encoding="utf-8")
    return path


def test_read_kernel_config_maps_all_keys():
    result = read_kernel_config(Config(dict(VALUES)))
    assert result == KernelConfig(
        memory_ip="127.0.0.1",
        memory_port=8002,
        dispatch_port=8001,
        interrupt_port=8004,
        io_port=8003,
        scheduling_algorithm="FIFO",
        suspension_time=4500,
        log_level="TRACE",
    )


def test_read_kernel_config_missing_key_raises():
    values = dict(VALUES)
    del values["LOG_LEVEL"]
    with pytest.raises(KeyError):
        read_kernel_config(Config(values))


def test_pcb_defaults_have_six_zero_entries():
    pcb = PCB()
    assert pcb.me == [0] * 6
    assert pcb.mt == [0] * 6
    assert (pcb.pid, pcb.pc) == (0, 0)


def test_pcb_tables_are_independent():
    first, second = PCB(), PCB()
    first.me[0] = 5
    assert second.me[0] == 0


def test_pcb_rejects_wrong_table_length():
    with pytest.raises(ValueError):
        PCB(me=[1, 2, 3])


def test_main_with_explicit_path(tmp_path):
    path = _write(tmp_path / "custom.config")
    assert main([str(path)]) == 0


def test_main_uses_default_file(tmp_path, monkeypatch):
    _write(tmp_path / "kernel.config")
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0


def test_main_missing_file_exits(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 1
    assert "No se puede crear la config" in capsys.readouterr().out