import pytest
import torch

from torchsurd.decomposition import (
    PerStateResult,
    SurdResult,
    decompose_state,
    enumerate_variable_sets,
    merge_states,
    specific_information_map,
)

_TENSOR_FIELDS = PerStateResult._fields[4:]


def _state(target_state, **fields):
    empty = {name: {} for name in PerStateResult._fields[1:]}
    empty.update(fields)
    return PerStateResult(target_state=target_state, **empty)


class TestMergeStates:
    """Tests for merge_states."""

    def test_returns_surd_result(self):
        result = merge_states([_state(0)], {(1,): 0.0}, 0.5)
        assert isinstance(result, SurdResult)
        assert result.info_leak == 0.5
        assert dict(result.mutual_info) == {(1,): 0.0}

    def test_sums_scalars(self):
        results = [
            _state(0, redundant_info={(1, 2): 0.1}, unique_info={(1,): 0.2}),
            _state(1, redundant_info={(1, 2): 0.3}, synergistic_info={(1, 2): 0.4}),
        ]
        result = merge_states(results, {}, 0.0)
        assert result.redundant_info[(1, 2)] == pytest.approx(0.4)
        assert result.unique_info[(1,)] == pytest.approx(0.2)
        assert result.synergistic_info[(1, 2)] == pytest.approx(0.4)

    def test_stacks_in_state_order(self):
        """Slices are stacked by ascending target state, whatever the input order."""
        results = [
            _state(t, causal_unique_states={(1,): torch.full((2, 1), float(t))})
            for t in (2, 0, 1)
        ]
        stacked = merge_states(results, {}, 0.0).causal_unique_states[(1,)]
        assert stacked.shape == (3, 2, 1)
        assert stacked[:, 0, 0].tolist() == [0.0, 1.0, 2.0]

    def test_missing_state_zero_filled(self):
        """Entry t of a stacked map is state t, zero where the key was skipped."""
        results = [
            _state(0, causal_synergistic_states={(1, 2): torch.ones(2, 2)}),
            _state(1),
            _state(2, causal_synergistic_states={(1, 2): torch.full((2, 2), 2.0)}),
        ]
        stacked = merge_states(results, {}, 0.0).causal_synergistic_states[(1, 2)]
        assert stacked.shape == (3, 2, 2)
        assert torch.equal(stacked[0], torch.ones(2, 2))
        assert torch.equal(stacked[1], torch.zeros(2, 2))
        assert torch.equal(stacked[2], torch.full((2, 2), 2.0))

    def test_stacked_entries_match_state_slices(self):
        """Merging keeps every per-state slice unchanged at its state index."""
        generator = torch.Generator().manual_seed(21)
        for _ in range(10):
            joint = torch.rand(3, 2, 3, 2, generator=generator, dtype=torch.float64)
            joint = joint / joint.sum()
            _, combs = enumerate_variable_sets(3)
            specific, mutual = specific_information_map(joint, combs)
            p_target = joint.sum(dim=(1, 2, 3))
            results = [
                decompose_state(t, combs, specific, p_target, joint)
                for t in range(3)
            ]

            merged = merge_states(results, mutual, 0.0)

            for field in _TENSOR_FIELDS:
                for key, stacked in getattr(merged, field).items():
                    assert stacked.shape == (3, 2, 3, 2)
                    for r in results:
                        per_state = getattr(r, field).get(key)
                        if per_state is None:
                            assert not stacked[r.target_state].any()
                        else:
                            assert torch.equal(stacked[r.target_state], per_state)

    def test_mismatched_shapes_rejected(self):
        results = [
            _state(0, causal_redundant_states={(1, 2): torch.ones(2, 1)}),
            _state(1, causal_redundant_states={(1, 2): torch.zeros(2, 3)}),
        ]
        with pytest.raises(RuntimeError):
            merge_states(results, {}, 0.0)

    def test_order_independent(self):
        results = [
            _state(0, unique_info={(2,): 0.1},
                   causal_unique_states={(2,): torch.tensor([[1.0, 2.0]])}),
            _state(1, unique_info={(2,): 0.2},
                   causal_unique_states={(2,): torch.tensor([[3.0, 4.0]])}),
        ]
        forward = merge_states(results, {}, 0.0)
        backward = merge_states(results[::-1], {}, 0.0)
        assert dict(forward.unique_info) == dict(backward.unique_info)
        assert torch.equal(
            forward.causal_unique_states[(2,)],
            backward.causal_unique_states[(2,)],
        )

    def test_read_only(self):
        result = merge_states([_state(0, unique_info={(1,): 0.1})], {}, 0.0)
        with pytest.raises(TypeError):
            result.unique_info[(1,)] = 1.0
        with pytest.raises(TypeError):
            result.mutual_info[(1,)] = 1.0

    def test_mutual_info_copied(self):
        mutual = {(1,): 0.3}
        result = merge_states([_state(0)], mutual, 0.0)
        mutual[(1,)] = 0.9
        assert result.mutual_info[(1,)] == 0.3

    def test_duplicate_states(self):
        with pytest.raises(ValueError, match="duplicate"):
            merge_states([_state(0), _state(0)], {}, 0.0)

    def test_no_results(self):
        result = merge_states([], {}, 1.0)
        assert len(result.synergistic_info) == 0
        assert len(result.causal_synergistic_states) == 0

    def test_gap_in_states(self):
        with pytest.raises(ValueError, match="cover"):
            merge_states([_state(0), _state(2)], {}, 0.0)
