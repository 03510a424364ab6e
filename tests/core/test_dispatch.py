from __future__ import annotations

import threading

import pytest

from treelog.core import Level, LogRecord, LoggerRegistry


def test_logging_methods_store_level() -> None:
    reg = LoggerRegistry()
    reg.root.level = Level.ALL
    records: list[LogRecord] = []
    reg.root.on_record.listen(records.append)

    root = reg.root
    root.finest("1")
    root.finer("2")
    root.fine("3")
    root.config("4")
    root.info("5")
    root.warning("6")
    root.severe("7")
    root.shout("8")
    root.log(Level("CUSTOM", 850), "9")

    assert [r.level for r in records] == [
        Level.FINEST,
        Level.FINER,
        Level.FINE,
        Level.CONFIG,
        Level.INFO,
        Level.WARNING,
        Level.SEVERE,
        Level.SHOUT,
        Level("CUSTOM", 850),
    ]
    assert [r.message for r in records] == [str(i) for i in range(1, 10)]


def test_logging_methods_store_error_and_trace() -> None:
    reg = LoggerRegistry()
    reg.root.level = Level.ALL
    records: list[LogRecord] = []
    reg.root.on_record.listen(records.append)

    try:
        raise ValueError("boom")
    except ValueError as exc:
        error = exc
        trace = exc.__traceback__

    reg.root.warning("w", error)
    reg.root.severe("s", error, trace)

    assert records[0].error is error
    assert records[0].stack_trace is None
    assert records[1].error is error
    assert records[1].stack_trace is trace


def test_message_logging_without_hierarchy() -> None:
    reg = LoggerRegistry()
    reg.root.level = Level.WARNING
    a = reg.get_logger("a")
    b = reg.get_logger("a.b")
    c = reg.get_logger("a.b.c")

    root_records: list[str] = []
    a_records: list[str] = []
    c_records: list[str] = []
    reg.root.on_record.listen(lambda r: root_records.append(f"{r.level}: {r.message}"))
    a.on_record.listen(lambda r: a_records.append(f"{r.level}: {r.message}"))
    c.on_record.listen(lambda r: c_records.append(f"{r.level}: {r.message}"))

    reg.root.info("1")
    reg.root.warning("2")
    a.info("3")
    a.warning("4")
    b.severe("5")
    c.shout("6")
    c.fine("7")

    expected = ["WARNING: 2", "WARNING: 4", "SEVERE: 5", "SHOUT: 6"]
    assert root_records == expected
    assert a_records == expected
    assert c_records == expected


def test_message_logging_with_hierarchy() -> None:
    reg = LoggerRegistry(hierarchical=True)
    reg.root.level = Level.INFO
    a = reg.get_logger("a")
    b = reg.get_logger("a.b")
    c = reg.get_logger("a.b.c")
    a.level = Level.FINE
    b.level = Level.WARNING

    root_records: list[str] = []
    a_records: list[str] = []
    b_records: list[str] = []
    c_records: list[str] = []
    reg.root.on_record.listen(lambda r: root_records.append(f"{r.level}: {r.message}"))
    a.on_record.listen(lambda r: a_records.append(f"{r.level}: {r.message}"))
    b.on_record.listen(lambda r: b_records.append(f"{r.level}: {r.message}"))
    c.on_record.listen(lambda r: c_records.append(f"{r.level}: {r.message}"))

    reg.root.fine("1")
    reg.root.info("2")
    reg.root.shout("3")
    a.finer("4")
    a.fine("5")
    a.shout("6")
    b.info("7")
    b.warning("8")
    c.info("9")
    c.severe("10")

    assert root_records == [
        "INFO: 2",
        "SHOUT: 3",
        "FINE: 5",
        "SHOUT: 6",
        "WARNING: 8",
        "SEVERE: 10",
    ]
    assert a_records == ["FINE: 5", "SHOUT: 6", "WARNING: 8", "SEVERE: 10"]
    assert b_records == ["WARNING: 8", "SEVERE: 10"]
    assert c_records == ["SEVERE: 10"]


def test_ancestors_receive_the_same_record_instance() -> None:
    reg = LoggerRegistry(hierarchical=True)
    reg.root.level = Level.WARNING
    a = reg.get_logger("a")
    b = reg.get_logger("a.b")
    c = reg.get_logger("a.b.c")
    streams: dict[str, list[LogRecord]] = {"": [], "a": [], "a.b": [], "a.b.c": []}
    for logger in (reg.root, a, b, c):
        logger.on_record.listen(streams[logger.full_name].append)

    c.info("quiet")
    assert all(not records for records in streams.values())

    c.warning("loud")
    for records in streams.values():
        assert len(records) == 1
    record = streams["a.b.c"][0]
    assert all(records[0] is record for records in streams.values())
    assert record.logger_name == "a.b.c"


def test_flat_mode_publishes_once_to_shared_stream() -> None:
    reg = LoggerRegistry()
    reg.root.level = Level.WARNING
    a = reg.get_logger("a")
    c = reg.get_logger("a.b.c")
    records: list[LogRecord] = []
    c.on_record.listen(records.append)

    c.info("quiet")
    assert records == []
    c.warning("loud")
    assert len(records) == 1
    assert records[0].logger_name == "a.b.c"
    assert a.on_record is reg.root.on_record


def test_lazy_message_is_not_evaluated_when_filtered() -> None:
    reg = LoggerRegistry()
    reg.root.level = Level.INFO
    calls: list[int] = []
    records: list[LogRecord] = []
    reg.root.on_record.listen(records.append)

    def _expensive() -> str:
        calls.append(1)
        return "computed"

    reg.root.fine(_expensive)
    assert calls == []
    assert records == []

    reg.root.info(_expensive)
    assert calls == [1]
    assert records[0].message == "computed"
    assert records[0].payload is None


def test_lazy_message_is_evaluated_without_listeners() -> None:
    reg = LoggerRegistry()
    calls: list[int] = []
    reg.root.info(lambda: calls.append(1) or "x")
    assert calls == [1]


def test_non_string_message_keeps_payload() -> None:
    reg = LoggerRegistry()
    records: list[LogRecord] = []
    reg.root.on_record.listen(records.append)
    payload = {"a": 1}
    items = [1, 2]

    reg.root.info(payload)
    reg.root.info(lambda: items)
    reg.root.info("plain")

    assert records[0].message == str(payload)
    assert records[0].payload is payload
    assert records[1].message == "[1, 2]"
    assert records[1].payload is items
    assert records[2].payload is None


def test_sequence_numbers_increase_across_loggers() -> None:
    reg = LoggerRegistry(hierarchical=True)
    other = LoggerRegistry()
    records: list[LogRecord] = []
    reg.root.on_record.listen(records.append)
    other.root.on_record.listen(records.append)

    reg.get_logger("x").info("1")
    other.get_logger("y").info("2")
    reg.get_logger("x.z").warning("3")
    reg.root.severe("4")

    numbers = [r.sequence_number for r in records]
    assert numbers == sorted(numbers)
    assert len(set(numbers)) == len(numbers)


def test_record_fields() -> None:
    reg = LoggerRegistry()
    records: list[LogRecord] = []
    reg.root.on_record.listen(records.append)
    reg.get_logger("svc.db").warning("disk")
    record = records[0]
    assert record.time.tzinfo is not None
    assert str(record) == "[WARNING] svc.db: disk"


def test_end_to_end_hierarchical_fine() -> None:
    reg = LoggerRegistry(hierarchical=True)
    reg.root.level = Level.FINE
    db = reg.get_logger("svc.db")
    db_records: list[LogRecord] = []
    root_records: list[LogRecord] = []
    db.on_record.listen(db_records.append)
    reg.root.on_record.listen(root_records.append)

    db.fine("q1")
    db.finer("q2")

    assert len(db_records) == 1
    assert len(root_records) == 1
    record = db_records[0]
    assert record is root_records[0]
    assert record.message == "q1"
    assert record.level == Level.FINE
    assert record.logger_name == "svc.db"


def test_handler_errors_propagate_to_caller() -> None:
    reg = LoggerRegistry()

    def _broken(_: LogRecord) -> None:
        raise RuntimeError("handler failed")

    reg.root.on_record.listen(_broken)
    with pytest.raises(RuntimeError, match="handler failed"):
        reg.root.info("x")


def test_sequence_numbers_unique_across_threads() -> None:
    reg = LoggerRegistry(hierarchical=True)
    reg.root.level = Level.ALL
    records: list[LogRecord] = []
    lock = threading.Lock()

    def _collect(record: LogRecord) -> None:
        with lock:
            records.append(record)

    reg.root.subscribe(_collect)
    workers = 8
    per_worker = 200
    barrier = threading.Barrier(workers)

    def _emit(index: int) -> None:
        logger = reg.get_logger(f"worker{index}")
        barrier.wait(timeout=5)
        for n in range(per_worker):
            logger.fine(str(n))

    threads = [
        threading.Thread(target=_emit, args=(index,))
        for index in range(workers)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert len(records) == workers * per_worker
    numbers = sorted(r.sequence_number for r in records)
    assert len(set(numbers)) == len(numbers)
    for name in {r.logger_name for r in records}:
        own = [r.sequence_number for r in records if r.logger_name == name]
        assert own == sorted(own)
