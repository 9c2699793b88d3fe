import numpy as np
import pytest

from desfeistel.tables import (
    E,
    FP,
    IP,
    P,
    PC1,
    PC2,
    SBOXES,
    SHIFT_SCHEDULE,
    inverse_permutation,
)


@pytest.mark.parametrize("table, length, source_size", [
    (IP, 64, 64),
    (FP, 64, 64),
    (E, 48, 32),
    (P, 32, 32),
    (PC1, 56, 64),
    (PC2, 48, 56),
])
def test_table_length_and_range(table, length, source_size):
    assert len(table) == length
    assert table.min() >= 0
    assert table.max() < source_size


@pytest.mark.parametrize("table", [IP, FP, P])
def test_bijective_tables(table):
    assert sorted(table.tolist()) == list(range(len(table)))


def test_final_permutation_inverts_initial():
    assert np.array_equal(FP, inverse_permutation(IP))
    assert np.array_equal(IP, inverse_permutation(FP))


def test_inverse_permutation_rejects_non_bijection():
    with pytest.raises(ValueError):
        inverse_permutation(E)


def test_expansion_duplicates_sixteen_bits():
    counts = np.bincount(E, minlength=32)
    assert counts.min() == 1
    assert np.count_nonzero(counts == 2) == 16


def test_pc1_drops_parity_bits():
    dropped = set(range(64)) - set(PC1.tolist())
    assert dropped == {7, 15, 23, 31, 39, 47, 55, 63}
    assert len(set(PC1.tolist())) == 56


def test_pc2_drops_eight_bits():
    assert len(set(PC2.tolist())) == 48
    assert set(range(56)) - set(PC2.tolist()) == {8, 17, 21, 24, 34, 37, 42, 53}


def test_shift_schedule_totals_full_rotation():
    assert len(SHIFT_SCHEDULE) == 16
    assert sum(SHIFT_SCHEDULE) == 28
    assert [i + 1 for i, s in enumerate(SHIFT_SCHEDULE) if s == 1] == [1, 2, 9, 16]


def test_sbox_rows_are_permutations():
    assert SBOXES.shape == (8, 4, 16)
    for box in SBOXES:
        for row in box:
            assert sorted(row.tolist()) == list(range(16))


def test_sbox_first_entries():
    assert [int(box[0][0]) for box in SBOXES] == [14, 15, 10, 7, 2, 12, 4, 13]


@pytest.mark.parametrize("table", [IP, FP, E, P, PC1, PC2, SBOXES])
def test_tables_are_read_only(table):
    with pytest.raises(ValueError):
        table[0] = 0
