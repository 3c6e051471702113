import pytest
import torch

from torchsurd.decomposition import (
    MaxOrder,
    enumerate_variable_sets,
    specific_information_map,
)


class TestEnumerateVariableSets:
    """Tests for enumerate_variable_sets."""

    def test_full(self):
        k, combs = enumerate_variable_sets(3)
        assert k == 3
        assert combs == [
            (1,), (2,), (3,),
            (1, 2), (1, 3), (2, 3),
            (1, 2, 3),
        ]

    def test_capped(self):
        k, combs = enumerate_variable_sets(3, MaxOrder.capped(2))
        assert k == 2
        assert combs == [(1,), (2,), (3,), (1, 2), (1, 3), (2, 3)]

    def test_singletons_only(self):
        _, combs = enumerate_variable_sets(4, 1)
        assert combs == [(1,), (2,), (3,), (4,)]

    def test_pairwise_count(self):
        """4 singletons and C(4, 2) = 6 pairs."""
        _, combs = enumerate_variable_sets(4, "pairwise")
        assert len(combs) == 10
        assert max(len(s) for s in combs) == 2

    def test_full_count(self):
        _, combs = enumerate_variable_sets(5)
        assert len(combs) == 2**5 - 1

    def test_clamped(self):
        with pytest.warns(RuntimeWarning):
            k, combs = enumerate_variable_sets(2, 4)
        assert k == 2
        assert combs == [(1,), (2,), (1, 2)]

    def test_single_source(self):
        assert enumerate_variable_sets(1) == (1, [(1,)])


class TestSpecificInformationMap:
    """Tests for specific_information_map."""

    def test_copy_and_noise(self):
        """T copies S1; S2 is independent noise."""
        joint = torch.zeros(2, 2, 2, dtype=torch.float64)
        joint[0, 0, :] = 0.25
        joint[1, 1, :] = 0.25
        _, combs = enumerate_variable_sets(2)

        specific, mutual = specific_information_map(joint, combs)

        assert set(specific) == {(1,), (2,), (1, 2)}
        torch.testing.assert_close(
            specific[(1,)], torch.ones(2, dtype=torch.float64)
        )
        assert mutual[(1,)] == pytest.approx(1.0)
        assert mutual[(2,)] == pytest.approx(0.0, abs=1e-12)
        assert mutual[(1, 2)] == pytest.approx(1.0)

    def test_mutual_is_float(self):
        joint = torch.full((2, 2), 0.25, dtype=torch.float64)
        _, mutual = specific_information_map(joint, [(1,)])
        assert isinstance(mutual[(1,)], float)
