import solar_modulation as sm
import numpy as np
import pytest
import os


def test_loads_single_line():
    tables = sm.reference_data.loads("# Label\n1.0 2.0 0.1\n")
    assert list(tables.keys()) == ["Label"]
    np.testing.assert_array_equal(tables["Label"], [[1.0, 2.0, 0.1]])


def test_loads_many_tables():
    text = "\n".join(
        [
            "#A",
            "1 10 1",
            "2 20 2",
            "",
            "#B",
            "3 30 3",
        ]
    )
    tables = sm.reference_data.loads(text)
    assert tables["A"].shape == (2, 3)
    assert tables["B"].shape == (1, 3)
    np.testing.assert_array_equal(tables["B"], [[3.0, 30.0, 3.0]])


def test_loads_empty_table():
    tables = sm.reference_data.loads("#A\n")
    assert tables["A"].shape == (0, 3)


def test_loads_ignores_lines_before_first_header():
    tables = sm.reference_data.loads("1 2 3\n#A\n4 5 6\n")
    np.testing.assert_array_equal(tables["A"], [[4.0, 5.0, 6.0]])


def test_loads_rescales_value_and_error():
    tables = sm.reference_data.loads("#A\n2.0 3.0 0.5\n", index=-2, norm=1e-4)
    np.testing.assert_allclose(tables["A"], [[2.0, 3.0 * 4e-4, 0.5 * 4e-4]])

    tables = sm.reference_data.loads("#A\n2.0 3.0 0.5\n", index=1, norm=10)
    np.testing.assert_allclose(tables["A"], [[2.0, 15.0, 2.5]])


def test_tables_are_read_only():
    tables = sm.reference_data.loads("#A\n1 2 3\n")
    with pytest.raises(ValueError):
        tables["A"][0, 0] = 5.0


def test_loads_malformed_number():
    with pytest.raises(sm.errors.MalformedReferenceDataError) as err:
        sm.reference_data.loads("#A\n1 2 3\n1 two 3\n")
    assert ":3:" in str(err.value)


def test_loads_wrong_number_of_columns():
    with pytest.raises(sm.errors.MalformedReferenceDataError):
        sm.reference_data.loads("#A\n1 2\n")
    with pytest.raises(ValueError):
        sm.reference_data.loads("#A\n1 2 3 4\n")


def test_read_from_file(tmp_path):
    path = os.path.join(str(tmp_path), "data.dat")
    with open(path, "wt") as f:
        f.write("#Label\n1.0 2.0 0.1\n")
    tables = sm.reference_data.read(path)
    np.testing.assert_array_equal(tables["Label"], [[1.0, 2.0, 0.1]])


def test_get_table_unknown_label():
    tables = sm.reference_data.loads("#A\n1 2 3\n")
    with pytest.raises(sm.errors.MalformedReferenceDataError):
        sm.reference_data.get_table(tables, "B")


def test_bundled_datasets():
    for key in sm.reference_data.DATASETS:
        table = sm.reference_data.read_dataset(key)
        assert table.shape[0] > 0
        assert table.shape[1] == 3
        assert np.all(table[:, 0] > 0)
        assert np.all(np.diff(table[:, 0]) > 0)
        assert np.all(table[:, 1] > 0)
        assert np.all(table[:, 2] > 0)


def test_dataset_in_other_resources_dir(tmp_path):
    with open(os.path.join(str(tmp_path), "pbar.dat"), "wt") as f:
        f.write("#AMS2016nonformal(0000/00)\n10.0 1e-3 1e-4\n")
    table = sm.reference_data.read_dataset(
        "antiproton", resources_dir=str(tmp_path)
    )
    np.testing.assert_allclose(table, [[10.0, 1e-5, 1e-6]])


def test_dataset_with_missing_label(tmp_path):
    with open(os.path.join(str(tmp_path), "bcratio.dat"), "wt") as f:
        f.write("#PAMELA\n1.0 0.3 0.01\n")
    with pytest.raises(sm.errors.MalformedReferenceDataError):
        sm.reference_data.read_dataset(
            "boron_carbon", resources_dir=str(tmp_path)
        )


def test_unknown_dataset():
    with pytest.raises(KeyError):
        sm.reference_data.read_dataset("positron_fraction")
