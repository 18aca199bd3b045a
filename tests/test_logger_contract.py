import logging


def test_logger_initializes(monkeypatch):
    monkeypatch.setenv("LIVELISTARR_VERBOSE", "1")

    from logger import init_logging, get_logger

    init_logging(module="test")
    log = get_logger("test")

    assert isinstance(log, logging.Logger)
    assert logging.getLogger().level == logging.DEBUG


def test_logger_console_output(capsys, monkeypatch):
    monkeypatch.setenv("LIVELISTARR_VERBOSE", "1")

    from logger import init_logging, get_logger

    init_logging(module="test")
    get_logger("test").info("hello")

    out = capsys.readouterr()

    # RichHandler writes to stdout
    assert "hello" in out.out


def test_quiet_suppresses_console(capsys, monkeypatch):
    monkeypatch.setenv("LIVELISTARR_QUIET", "1")

    from logger import init_logging, get_logger

    init_logging(module="test")
    get_logger("test").warning("shh")

    assert "shh" not in capsys.readouterr().out
