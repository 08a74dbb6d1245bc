from __future__ import annotations

import logging

from eve_alert_dashboard.core.decoder import (
    decode_line,
    decode_records,
    iter_decoded,
    iter_lines,
)
from eve_alert_dashboard.core.models import LineStatus


def test_iter_lines_trims_and_drops_blank_lines() -> None:
    text = '  {"a":1}  \r\n\n   \n\t{"b":2}\r\n'
    assert list(iter_lines(text)) == [(1, '{"a":1}'), (4, '{"b":2}')]


def test_decode_line_success() -> None:
    d = decode_line(3, '{"event_type":"alert","dest_port":80}')
    assert d.status is LineStatus.OK
    assert d.line_no == 3
    assert d.record == {"event_type": "alert", "dest_port": 80}
    assert d.error is None


def test_decode_line_malformed() -> None:
    d = decode_line(1, "{bad json")
    assert d.status is LineStatus.MALFORMED
    assert d.record is None
    assert d.error


def test_decode_line_rejects_nan_literal() -> None:
    d = decode_line(1, '{"dest_port": NaN}')
    assert d.status is LineStatus.MALFORMED


def test_decode_line_non_object() -> None:
    d = decode_line(1, "[1, 2, 3]")
    assert d.status is LineStatus.NOT_OBJECT


def test_decode_records_skips_malformed_and_warns(caplog) -> None:
    text = '{"n":1}\n{bad json\n{"n":2}\n'
    with caplog.at_level(logging.WARNING, logger="eve_alert_dashboard.core.decoder"):
        records = decode_records(text)

    assert records == [{"n": 1}, {"n": 2}]
    assert any("Skipping malformed line: {bad json" in r.getMessage() for r in caplog.records)


def test_decode_records_all_malformed_is_empty() -> None:
    assert decode_records("nope\n{\n]") == []


def test_decode_records_drops_scalars_quietly(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="eve_alert_dashboard.core.decoder"):
        records = decode_records('null\n42\n"text"\n{"ok":true}')

    assert records == [{"ok": True}]
    assert not caplog.records


def test_iter_decoded_preserves_line_numbers() -> None:
    results = list(iter_decoded('{"a":1}\n\nbroken\n{"b":2}'))
    assert [(d.line_no, d.status) for d in results] == [
        (1, LineStatus.OK),
        (3, LineStatus.MALFORMED),
        (4, LineStatus.OK),
    ]


def test_iter_lines_strips_byte_order_mark() -> None:
    text = '\ufeff{"a":1}\n\ufeff\n{"b":2}\ufeff'
    assert list(iter_lines(text)) == [(1, '{"a":1}'), (3, '{"b":2}')]


def test_decode_line_deep_nesting_is_malformed() -> None:
    d = decode_line(1, "[" * 200000)
    assert d.status is LineStatus.MALFORMED
    assert d.record is None


def test_decode_records_survives_deeply_nested_line(caplog) -> None:
    text = "[" * 200000 + '\n{"n":1}\n'
    with caplog.at_level(logging.WARNING, logger="eve_alert_dashboard.core.decoder"):
        records = decode_records(text)

    assert records == [{"n": 1}]
    assert len(caplog.records) == 1
