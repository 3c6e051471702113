import pytest
import torch

from torchsurd.decomposition import state_slice
from torchsurd.information import specific_information


def _random_joint(*shape, seed=0):
    generator = torch.Generator().manual_seed(seed)
    p = torch.rand(*shape, generator=generator, dtype=torch.float64)
    return p / p.sum()


class TestStateSliceBasic:
    """Tests for basic behavior of state_slice."""

    def test_shape(self):
        """One dimension per involved source, in ascending source order."""
        joint = _random_joint(2, 3, 4, 5)
        causal, non_causal = state_slice(joint, (3,), (1,), 0)
        assert causal.shape == (3, 5)
        assert non_causal.shape == (3, 5)

    def test_shape_keepdim(self):
        """keepdim spans every source dimension."""
        joint = _random_joint(2, 3, 4, 5)
        causal, non_causal = state_slice(joint, (3,), (1,), 0, keepdim=True)
        assert causal.shape == (3, 4, 5)
        assert non_causal.shape == (3, 4, 5)

    def test_overlapping_sources(self):
        joint = _random_joint(2, 3, 4)
        causal, _ = state_slice(joint, (1, 2), (2,), 1)
        assert causal.shape == (3, 4)

    def test_signs(self):
        joint = _random_joint(3, 3, 3, seed=1)
        causal, non_causal = state_slice(joint, (1, 2), (1,), 2)
        assert (causal >= 0).all()
        assert (non_causal <= 0).all()

    def test_negative_target_state(self):
        joint = _random_joint(3, 2)
        for a, b in zip(state_slice(joint, (1,), (), -1),
                        state_slice(joint, (1,), (), 2)):
            assert torch.equal(a, b)

    def test_target_state_out_of_range(self):
        with pytest.raises(IndexError):
            state_slice(_random_joint(2, 2), (1,), (), 2)

    def test_source_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            state_slice(_random_joint(2, 2), (2,), (), 0)

    def test_previous_out_of_range(self):
        with pytest.raises(ValueError, match="out of range"):
            state_slice(_random_joint(2, 2), (1,), (0,), 0)

    def test_empty_current(self):
        with pytest.raises(ValueError, match="current"):
            state_slice(_random_joint(2, 2), (), (1,), 0)


class TestStateSliceCorrectness:
    """Tests for numerical correctness of state_slice."""

    def test_copy(self):
        """T copies S1: all mass of state 0 is causal at S1 = 0."""
        joint = torch.tensor([[0.5, 0.0], [0.0, 0.5]], dtype=torch.float64)
        causal, non_causal = state_slice(joint, (1,), (), 0)
        torch.testing.assert_close(
            causal, torch.tensor([0.5, 0.0], dtype=torch.float64)
        )
        assert torch.equal(non_causal, torch.zeros(2, dtype=torch.float64))

    def test_sum_without_previous(self):
        """Summing the slice gives p(t) i(t; A)."""
        joint = _random_joint(3, 2, 4, seed=2)
        p_t = joint.sum(dim=(1, 2))
        for t in range(3):
            causal, non_causal = state_slice(joint, (1, 2), (), t)
            expected = float(p_t[t] * specific_information(joint, (1, 2))[t])
            assert float((causal + non_causal).sum()) == pytest.approx(
                expected, abs=1e-12
            )

    def test_sum_with_previous(self):
        """Summing the slice gives p(t) (i(t; A) - i(t; B))."""
        joint = _random_joint(2, 3, 2, seed=4)
        p_t = joint.sum(dim=(1, 2))
        for t in range(2):
            causal, non_causal = state_slice(joint, (1, 2), (1,), t)
            i_a = specific_information(joint, (1, 2))[t]
            i_b = specific_information(joint, (1,))[t]
            expected = float(p_t[t] * (i_a - i_b))
            assert float((causal + non_causal).sum()) == pytest.approx(
                expected, abs=1e-12
            )

    def test_keepdim_sums_to_involved_slice(self):
        """Summing the uninvolved sources of a keepdim slice gives the plain slice."""
        joint = _random_joint(2, 3, 4, 2, seed=6)
        flat_c, flat_n = state_slice(joint, (1,), (3,), 1)
        kept_c, kept_n = state_slice(joint, (1,), (3,), 1, keepdim=True)
        torch.testing.assert_close(kept_c.sum(dim=1), flat_c)
        torch.testing.assert_close(kept_n.sum(dim=1), flat_n)

    def test_keepdim_preserves_mass(self):
        """The keepdim slice carries the same total as the plain slice."""
        joint = _random_joint(3, 2, 3, 2, seed=12)
        for t in range(3):
            flat_c, flat_n = state_slice(joint, (2,), (), t)
            kept_c, kept_n = state_slice(joint, (2,), (), t, keepdim=True)
            assert float(kept_c.sum()) == pytest.approx(float(flat_c.sum()), abs=1e-14)
            assert float(kept_n.sum()) == pytest.approx(float(flat_n.sum()), abs=1e-14)

    def test_keepdim_weighted_by_full_joint(self):
        """Uninvolved sources split the slice in proportion to their joint mass."""
        joint = _random_joint(2, 2, 3, seed=13)
        flat, _ = state_slice(joint, (1,), (), 0)
        kept, _ = state_slice(joint, (1,), (), 0, keepdim=True)
        share = joint[0] / joint[0].sum(dim=1, keepdim=True)
        torch.testing.assert_close(kept, flat[:, None] * share)

    def test_finite_with_zero_cells(self):
        joint = torch.tensor(
            [[[0.5, 0.0], [0.0, 0.0]], [[0.0, 0.0], [0.0, 0.5]]],
            dtype=torch.float64,
        )
        for t in range(2):
            causal, non_causal = state_slice(joint, (1, 2), (2,), t)
            assert torch.isfinite(causal).all()
            assert torch.isfinite(non_causal).all()
