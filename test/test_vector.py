import pytest

from numframe.dataframe import ColumnVector, DataVector, RowVector, UnknownColumnError
from numframe.dataframe.vector import row_name


def test_row_name():
    """Test the names of rows."""
    assert row_name(0) == "row_0"
    assert row_name(12) == "row_12"


def test_data_vector():
    """Test the accessors of DataVector."""
    vector = DataVector("v", ["a", "b"], [1, 2])
    assert vector.name == vector.get_name() == "v"
    assert vector.entry_names == vector.get_entry_names() == ("a", "b")
    assert vector.values == vector.get_values() == (1.0, 2.0)
    assert len(vector) == 2
    assert list(vector) == [1.0, 2.0]
    assert vector["b"] == 2.0


def test_data_vector_mismatched_lengths():
    """Test a vector with more names than values."""
    with pytest.raises(ValueError, match="2 entry names for 1 values"):
        DataVector("v", ["a", "b"], [1])


def test_data_vector_missing_entry():
    """Test reading an entry that doesn't exist."""
    with pytest.raises(KeyError):
        DataVector("v", ["a"], [1]).get_value("b")


def test_as_map_duplicates_last_wins():
    """Test as_map with repeated entry names."""
    vector = DataVector("v", ["a", "b", "a"], [1, 2, 3])
    assert vector.as_map() == {"a": 3.0, "b": 2.0}
    assert vector.get_value("a") == 1.0


def test_vector_does_not_keep_input():
    """Test that the vector copies its values."""
    values = [1.0, 2.0]
    vector = DataVector("v", ["a", "b"], values)
    values[0] = 10.0
    assert vector.values == (1.0, 2.0)


def test_row_vector_lookup_by_column_name():
    """Test reading a row value by column name."""
    row = RowVector(3, ["x", "y"], [5, 6])
    assert row.name == "row_3"
    assert row.index == 3
    assert row.get_value("y") == 6.0


def test_row_vector_unknown_column():
    """Test reading a row value of a column that doesn't exist."""
    row = RowVector(0, ["x"], [5])
    with pytest.raises(UnknownColumnError):
        row.get_value("row_0")


def test_column_vector_entries():
    """Test the entry names of a column."""
    column = ColumnVector("c", [7, 8, 9])
    assert column.name == "c"
    assert column.entry_names == ("row_0", "row_1", "row_2")
    assert column.as_map() == {"row_0": 7.0, "row_1": 8.0, "row_2": 9.0}


@pytest.mark.parametrize("key, expected", [("row_0", 7.0), ("row_2", 9.0), (1, 8.0)])
def test_column_vector_lookup(key, expected):
    """Test reading a column value by row key."""
    assert ColumnVector("c", [7, 8, 9]).get_value(key) == expected


@pytest.mark.parametrize("key", ["c_1", "row_", "row_x", "1", "", "row_-1", 1.0, True])
def test_column_vector_malformed_key(key):
    """Test reading a column value with an invalid row key."""
    with pytest.raises(ValueError, match="Invalid row key"):
        ColumnVector("c", [7, 8, 9]).get_value(key)


@pytest.mark.parametrize("key", ["row_3", 3, -1])
def test_column_vector_out_of_range(key):
    """Test reading a column value of a row that doesn't exist."""
    with pytest.raises(IndexError):
        ColumnVector("c", [7, 8, 9]).get_value(key)


def test_equality():
    """Test comparing vectors of the same and different kinds."""
    assert RowVector(0, ["a"], [1]) == RowVector(0, ["a"], [1.0])
    assert RowVector(0, ["a"], [1]) != RowVector(1, ["a"], [1])
    assert ColumnVector("row_0", [1]) != DataVector("row_0", ["row_0"], [1])
    assert hash(ColumnVector("c", [1])) == hash(ColumnVector("c", [1.0]))


def test_repr():
    """Test the representation of a vector."""
    assert repr(DataVector("v", ["a"], [1])) == "DataVector(name='v', entries={'a': 1.0})"
