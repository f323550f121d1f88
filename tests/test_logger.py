from crowlang.logger import Logger, get_instance


def test_new_logger_has_no_messages():
    assert Logger().logs() == []


def test_messages_kept_in_order():
    logger = Logger()
    logger.log("first")
    logger.log("second")
    assert logger.logs() == ["first", "second"]


def test_logs_returns_a_copy():
    logger = Logger()
    logger.log("kept")
    logger.logs().append("extra")
    assert logger.logs() == ["kept"]


def test_get_instance_returns_same_logger():
    first = get_instance()
    second = get_instance()
    assert first is second


def test_shared_logger_collects_messages():
    shared = get_instance()
    before = len(shared.logs())
    get_instance().log("shared message")
    assert len(shared.logs()) == before + 1
    assert shared.logs()[-1] == "shared message"