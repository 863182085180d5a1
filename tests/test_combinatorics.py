from variantgen.combinatorics import cartesian


def test_no_dimensions_is_single_empty_tuple():
    assert cartesian([]) == [()]


def test_last_dimension_varies_fastest():
    assert cartesian([["Red", "Black"], ["S", "M"]]) == [
        ("Red", "S"),
        ("Red", "M"),
        ("Black", "S"),
        ("Black", "M"),
    ]


def test_cardinality_is_product_of_sizes():
    dims = [["a", "b"], ["1", "2", "3"], ["x", "y", "z", "w"]]
    combos = cartesian(dims)
    assert len(combos) == 2 * 3 * 4
    assert len(set(combos)) == len(combos)
    assert all(len(c) == 3 for c in combos)


def test_empty_dimension_yields_nothing():
    assert cartesian([["a"], []]) == []


def test_does_not_touch_input():
    dims = [["a", "b"], ["c"]]
    first = cartesian(dims)
    assert cartesian(dims) == first
    assert dims == [["a", "b"], ["c"]]
