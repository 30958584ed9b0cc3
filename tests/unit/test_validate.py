"""
Unit tests for dataset sanity checks (dialect_ingest.validate).
"""

from __future__ import annotations

import pytest

from dialect_ingest.exceptions import (
    EmptyHeadersError,
    NotEnoughRowsError,
    WrongTimeColumnOrUnitsError,
)
from dialect_ingest.parsers.dsv import DSVParser
from dialect_ingest.validate import ensure_data_is_correct


def _parse(text: str):
    return DSVParser().parse(text, ",")


class TestEnsureDataIsCorrect:
    """Tests for ensure_data_is_correct()."""

    def test_valid_time_column(self, year_parser):
        ds = _parse("geo,year,value\nCanada,2001,1.5")
        ensure_data_is_correct(ds, 1, {"year": year_parser})

    def test_time_value_is_stripped(self):
        seen: list[str] = []

        def parser(value: str) -> bool:
            seen.append(value)
            return True

        ds = _parse("geo,year\nCanada, 2001 ")
        ensure_data_is_correct(ds, 1, {"year": parser})
        assert seen == ["2001"]

    def test_rejected_time_value(self, year_parser):
        ds = _parse("geo,value,year\nCanada,1.5,2001")
        with pytest.raises(WrongTimeColumnOrUnitsError) as exc_info:
            ensure_data_is_correct(ds, 1, {"value": year_parser})
        assert exc_info.value.value == "1.5"
        assert exc_info.value.code == "reader/error/wrongTimeUnitsOrColumn"

    def test_only_first_row_is_checked(self, year_parser):
        ds = _parse("geo,year\nCanada,2001\nNorway,later")
        ensure_data_is_correct(ds, 1, {"year": year_parser})

    def test_no_parser_for_time_column_skips_check(self, year_parser):
        ds = _parse("geo,year\nCanada,soon")
        ensure_data_is_correct(ds, 1, {"other": year_parser})

    def test_no_parsers_at_all(self):
        ds = _parse("geo,year\nCanada,soon")
        ensure_data_is_correct(ds, 1)

    def test_time_index_past_header_with_parsers(self, year_parser):
        ds = _parse("geo,year\nCanada,2001")
        with pytest.raises(WrongTimeColumnOrUnitsError):
            ensure_data_is_correct(ds, 5, {"year": year_parser})

    def test_empty_headers(self):
        ds = _parse(",,\n1,2,3")
        with pytest.raises(EmptyHeadersError):
            ensure_data_is_correct(ds, 1)

    def test_one_non_empty_header_is_enough(self):
        ds = _parse(",b,\n1,2,3")
        ensure_data_is_correct(ds, 1)

    def test_time_check_runs_before_header_check(self):
        ds = _parse(",,\n1,2,3")
        with pytest.raises(WrongTimeColumnOrUnitsError):
            ensure_data_is_correct(ds, 1, {"": lambda v: False})

    def test_no_data_rows(self, year_parser):
        ds = _parse("geo,year\n,\n")
        with pytest.raises(NotEnoughRowsError):
            ensure_data_is_correct(ds, 1, {"year": year_parser})
