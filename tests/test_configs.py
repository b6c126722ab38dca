import pytest

from kernelsim.configs import (
    Config,
    ConfigError,
    load_config,
    start_config,
    start_logger,
)


def _write(tmp_path, text):
    path = tmp_path / "kernel.config"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_config_reads_pairs_and_skips_comments(tmp_path):
    path = _write(tmp_path, "# comment\nIP_MEMORIA=127.0.0.1\n\nPUERTO_MEMORIA=8002\n")
    config = load_config(path)
    assert config.values == {"IP_MEMORIA": "127.0.0.1", "PUERTO_MEMORIA": "8002"}
    assert config.path == str(path)


def test_get_int_and_get_string(tmp_path):
    config = load_config(_write(tmp_path, "PUERTO=8002\nALGORITMO=FIFO\n"))
    assert config.get_int("PUERTO") == 8002
    assert config.get_string("ALGORITMO") == "FIFO"


def test_value_keeps_later_equals_signs():
    config = Config({"A": "b=c"})
    assert config.get_string("A") == "b=c"


def test_get_int_parses_leading_digits_only():
    config = Config({"N": "12abc", "S": "abc", "NEG": " -7"})
    assert config.get_int("N") == 12
    assert config.get_int("S") == 0
    assert config.get_int("NEG") == -7


def test_has_and_missing_key():
    config = Config({"A": "1"})
    assert config.has("A")
    assert not config.has("B")
    with pytest.raises(KeyError):
        config.get_string("B")


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.config")


def test_start_config_missing_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as info:
        start_config(tmp_path / "absent.config")
    assert info.value.code == 1
    assert "No se puede crear la config" in capsys.readouterr().out


def test_start_config_success(tmp_path):
    config = start_config(_write(tmp_path, "LOG_LEVEL=INFO\n"))
    assert config.get_string("LOG_LEVEL") == "INFO"


def test_start_logger_announces_start(tmp_path, capsys):
    log_file = tmp_path / "kernel.log"
    logger = start_logger(str(log_file), "kernelsim-test-proc")
    try:
        logger = start_logger(str(log_file), "kernelsim-test-proc")
        assert len(logger.handlers) == 2
        assert log_file.read_text(encoding="utf-8").count("kernelsim-test-proc iniciado") == 2
        assert "kernelsim-test-proc iniciado" in capsys.readouterr().out
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)