import logging

from prometheus_client import REGISTRY

from syllable_counter.utils import create_counter, get_logger


def test_structured_logger_renders_bound_and_call_context(caplog):
    logger = get_logger("syllable_counter.tests").bind(component="cache")
    caplog.set_level(logging.INFO, logger="syllable_counter.tests")

    logger.info("Cache opened", context={"entries": 3})

    (record,) = caplog.records
    assert record.message == 'Cache opened | {"component": "cache", "entries": 3}'


def test_structured_logger_without_context_leaves_message_alone(caplog):
    logger = get_logger("syllable_counter.tests")
    caplog.set_level(logging.INFO, logger="syllable_counter.tests")

    logger.info("plain")

    assert caplog.records[0].message == "plain"


def test_create_counter_reuses_registered_collector():
    first = create_counter("syllable_counter_test_events", "Test events.")
    second = create_counter("syllable_counter_test_events", "Test events.")

    first.inc()
    second.inc(2)

    assert REGISTRY.get_sample_value("syllable_counter_test_events_total") == 3.0
