import operator

import pyarrow as pa
import pytest

from numframe import DataFrame, RandomFrameGenerator


def test_generated_frame_analysis():
    """Test transforming and analysing a generated frame."""
    df = RandomFrameGenerator.gaussian(0.0, 1.0).generate(2024, 500, ["a", "b"])
    shifted = df.compute_column("c", lambda row: row["a"] + 5.0)

    statistics = shifted.statistics()
    assert statistics.t_test("c", "a") < 1e-6
    assert statistics.pearsons_correlation("a", "c") == pytest.approx(1.0)
    assert statistics.describe("c").mean == pytest.approx(
        statistics.describe("a").mean + 5.0
    )

    positives = shifted.select(lambda row: row["a"] > 0).project(["a"])
    assert all(v > 0 for v in positives.get_column("a"))
    assert positives.row_count < df.row_count


def test_arrow_table_pipeline():
    """Test transforming data loaded from a pyarrow Table."""
    table = pa.table({"id": [1, 2, 3, 4], "amount": [100, 200, 150, 300]})
    df = DataFrame.from_arrow(table)

    result = (
        df.select(lambda row: row["amount"] > 100)
        .expand(0, ["taxed"])
        .compute_column("total", lambda row: row["amount"] * 1.1)
    )
    summary = result.project(["amount", "total"]).summarize("sum", operator.add)

    assert result.to_arrow().column_names == ["id", "amount", "taxed", "total"]
    assert summary.get_value("amount") == 650.0
    assert summary.get_value("total") == pytest.approx(715.0)
