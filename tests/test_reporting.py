import math

import numpy as np
import pandas as pd
import pytest

from unitconv.engine import ConversionRequest, convert
from unitconv.errors import CategoryNotFound
from unitconv.reporting import (
    conversion_matrix,
    create_results_dataframe,
    format_converted_value,
    save_data_to_csv,
    unit_options,
)
from unitconv.schema import ResultColumns


def test_format_converted_value():
    assert format_converted_value(None) == "0"
    assert format_converted_value(3.78541) == "3.79"
    assert format_converted_value(-0.5, decimals=3) == "-0.500"
    with pytest.raises(ValueError):
        format_converted_value(math.nan)


def test_unit_options_grouped_and_capitalised():
    options = unit_options()
    assert [label for label, _ in options] == ["Length", "Weight", "Volume"]
    assert options[2][1][0] == "Milliliters (ml)"
    assert len(options[0][1]) == 8


def test_create_results_dataframe_and_columns():
    cols = ResultColumns()
    requests = [
        ConversionRequest(1000, "Millimeters (mm)", "Meters (m)"),
        ConversionRequest(1, "Meters (m)", "Kilograms (kg)"),
        ConversionRequest(1, "Parsecs (pc)", "Meters (m)"),
    ]
    pairs = [(r, convert(r.value, r.source_unit, r.target_unit)) for r in requests]

    df = create_results_dataframe(pairs)

    assert list(df.columns) == [
        cols.value,
        cols.source,
        cols.target,
        cols.category,
        cols.result,
        cols.display,
        cols.error,
    ]
    assert len(df) == 3
    assert df.loc[0, cols.result] == pytest.approx(1.0)
    assert df.loc[0, cols.display] == "1.00"
    assert df.loc[0, cols.category] == "length"
    assert df.loc[1, cols.error] == "incompatible_units"
    assert np.isnan(df.loc[1, cols.result])
    assert df.loc[2, cols.error] == "unit_not_found"
    assert df.loc[2, cols.category] == ""


def test_conversion_matrix_is_reciprocal():
    matrix = conversion_matrix("length")
    assert matrix.shape == (8, 8)
    assert list(matrix.index) == list(matrix.columns)
    assert matrix.loc["Meters (m)", "Centimeters (cm)"] == pytest.approx(100.0)
    assert matrix.loc["Feet (ft)", "Inches (in)"] == pytest.approx(12.0)
    np.testing.assert_allclose(np.diag(matrix.values), 1.0)
    np.testing.assert_allclose(matrix.values * matrix.values.T, 1.0)


def test_conversion_matrix_unknown_category():
    with pytest.raises(CategoryNotFound):
        conversion_matrix("temperature")


def test_save_data_to_csv(tmp_path):
    request = ConversionRequest(1, "Kilograms (kg)", "Grams (g)")
    df = create_results_dataframe([(request, convert(1, "Kilograms (kg)", "Grams (g)"))])

    path = save_data_to_csv(df, output_dir=str(tmp_path / "out"))

    assert path.endswith("conversion_results.csv")
    reloaded = pd.read_csv(path)
    assert reloaded.loc[0, ResultColumns().result] == pytest.approx(1000.0)


def test_results_dataframe_leaves_overflow_undisplayed():
    cols = ResultColumns()
    request = ConversionRequest(1e308, "Kilometers (km)", "Millimeters (mm)")
    result = convert(request.value, request.source_unit, request.target_unit)

    df = create_results_dataframe([(request, result)])

    assert math.isinf(df.loc[0, cols.result])
    assert df.loc[0, cols.display] == ""


def test_category_column_follows_source_unit():
    cols = ResultColumns()
    request = ConversionRequest(1, "Pounds (lb)", "Liters (l)")
    df = create_results_dataframe([(request, convert(1, "Pounds (lb)", "Liters (l)"))])
    assert df.loc[0, cols.category] == "weight"
