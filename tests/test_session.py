import pytest

from unitconv.engine import ConversionEngine, ConversionRequest
from unitconv.errors import IncompatibleUnits, MissingInput, ResultOutOfRange, UnitNotFound
from unitconv.session import (
    INCOMPATIBLE_NOTICE,
    MISSING_INPUT_NOTICE,
    OUT_OF_RANGE_NOTICE,
    ConverterSession,
    check_request,
    parse_value,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("12.5", 12.5),
        ("  -3", -3.0),
        ("12.5 kg", 12.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("0", 0.0),
    ],
)
def test_parse_value_numeric_prefix(text, expected):
    assert parse_value(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", [None, "", "   ", "abc", "-", "1e999"])
def test_parse_value_rejects_unparseable(text):
    assert parse_value(text) is None


def test_check_request_lists_every_missing_field():
    with pytest.raises(MissingInput) as excinfo:
        check_request(ConversionRequest(None, "Meters (m)", None))
    assert excinfo.value.fields == ("value", "target_unit")

    check_request(ConversionRequest(0.0, "Meters (m)", "Feet (ft)"))


class _RecordingEngine(ConversionEngine):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def convert_request(self, request):
        self.calls += 1
        return super().convert_request(request)


def test_missing_input_short_circuits_before_engine():
    engine = _RecordingEngine()
    session = ConverterSession(engine)
    session.set_source_unit("Meters (m)")
    session.set_target_unit("Feet (ft)")
    session.set_value("")

    result = session.submit()

    assert isinstance(result.error, MissingInput)
    assert engine.calls == 0
    assert session.notice == MISSING_INPUT_NOTICE
    assert session.display_value == "0"


def test_successful_submit_formats_for_display():
    session = ConverterSession()
    session.set_value("5")
    session.set_source_unit("Feet (ft)")
    session.set_target_unit("Inches (in)")

    result = session.submit()

    assert result.ok
    assert session.converted_value == pytest.approx(60.0)
    assert session.display_value == "60.00"
    assert session.display_unit == "Inches (in)"
    assert session.notice is None


def test_failed_submit_clears_stale_result():
    session = ConverterSession()
    session.set_value("1")
    session.set_source_unit("Gallons (gal)")
    session.set_target_unit("Liters (l)")
    session.submit()
    assert session.display_value == "3.79"

    session.set_target_unit("Pounds (lb)")
    result = session.submit()

    assert isinstance(result.error, IncompatibleUnits)
    assert session.converted_value is None
    assert session.display_value == "0"
    assert session.notice == INCOMPATIBLE_NOTICE


def test_unknown_unit_notice():
    session = ConverterSession()
    session.set_value("1")
    session.set_source_unit("Parsecs (pc)")
    session.set_target_unit("Meters (m)")

    result = session.submit()

    assert isinstance(result.error, UnitNotFound)
    assert session.notice == "Unknown unit: Parsecs (pc)"


def test_display_unit_placeholder():
    assert ConverterSession().display_unit == "Unit"


def test_overflowing_result_is_a_classified_failure():
    session = ConverterSession()
    session.set_value("1")
    session.set_source_unit("Meters (m)")
    session.set_target_unit("Feet (ft)")
    session.submit()

    session.set_value("1e308")
    session.set_source_unit("Kilometers (km)")
    session.set_target_unit("Millimeters (mm)")
    result = session.submit()

    assert isinstance(result.error, ResultOutOfRange)
    assert result.error.source_unit == "Kilometers (km)"
    assert session.converted_value is None
    assert session.notice == OUT_OF_RANGE_NOTICE
    assert session.display_value == "0"
