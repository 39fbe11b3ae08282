import structlog

from hifz.logging import configure_logging


def test_renderer_follows_format():
    try:
        configure_logging("DEBUG", "console")
        assert isinstance(structlog.get_config()["processors"][-1], structlog.dev.ConsoleRenderer)

        configure_logging("INFO", "json")
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
    finally:
        configure_logging("INFO", "json")


def test_events_carry_level_and_timestamp():
    configure_logging("INFO", "json")
    processors = structlog.get_config()["processors"]

    event = {"event": "review_scheduled", "surah_id": 1}
    for processor in processors[:-1]:
        event = processor(None, "info", event)

    assert event["level"] == "info"
    assert "timestamp" in event
