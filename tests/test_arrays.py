import pytest
from hypothesis import given
from hypothesis import strategies as st

from algodrills.arrays import (
    count_subarrays_with_sum,
    longest_consecutive,
    majority_elements,
    max_consecutive_ones,
    max_profit,
    maximum,
    missing_number,
    move_zeroes_to_end,
    rearrange_by_sign,
    rotate_right,
    single_number,
    sort_colors,
    two_sum,
)


def test_two_sum_source_example():
    assert two_sum([2, 4, 3, 5, 1, 8, 6], 10) == (5, 0)


@given(st.lists(st.integers(-50, 50), min_size=2, max_size=30), st.integers(-100, 100))
def test_two_sum_pair_adds_up(nums, target):
    result = two_sum(nums, target)
    if result is None:
        assert all(
            nums[i] + nums[j] != target
            for i in range(len(nums))
            for j in range(i + 1, len(nums))
        )
    else:
        later, earlier = result
        assert earlier < later
        assert nums[earlier] + nums[later] == target


def test_two_sum_absent():
    assert two_sum([1, 2], 10) is None


def test_rotate_right_source_example():
    assert rotate_right([1, 2, 3, 4, 5, 6, 7, 8, 9], 3) == [7, 8, 9, 1, 2, 3, 4, 5, 6]


@given(st.lists(st.integers(), max_size=20), st.data())
def test_rotate_right_round_trip(nums, data):
    k = data.draw(st.integers(0, len(nums)))
    rotated = rotate_right(nums, k)
    assert rotate_right(rotated, len(nums) - k) == nums


def test_rotate_right_full_turn_is_identity():
    nums = [4, 5, 6]
    assert rotate_right(nums, 0) == nums
    assert rotate_right(nums, len(nums)) == nums


@pytest.mark.parametrize("k", [-1, 4])
def test_rotate_right_rejects_bad_k(k):
    with pytest.raises(ValueError):
        rotate_right([1, 2, 3], k)


@given(st.lists(st.integers(-5, 5)))
def test_move_zeroes_keeps_order(nums):
    result = move_zeroes_to_end(nums)
    non_zero = [x for x in nums if x != 0]
    assert result[: len(non_zero)] == non_zero
    assert result[len(non_zero):] == [0] * nums.count(0)


def test_max_profit_source_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


@given(st.lists(st.integers(0, 1000), min_size=1))
def test_max_profit_bounds(prices):
    profit = max_profit(prices)
    assert 0 <= profit <= max(prices) - min(prices)


def test_max_profit_falling_prices():
    prices = [9, 7, 7, 3]
    assert max_profit(prices) == max_profit(prices[:1])


def test_max_profit_empty():
    with pytest.raises(ValueError):
        max_profit([])


@given(st.lists(st.integers(), min_size=1))
def test_maximum_matches_builtin(values):
    assert maximum(values) == max(values)


def test_maximum_empty():
    with pytest.raises(ValueError):
        maximum([])


@given(st.integers(-100, 100), st.integers(1, 30), st.randoms())
def test_longest_consecutive_shuffled_run(start, length, rnd):
    run = list(range(start, start + length))
    nums = run + run[: length // 2] + [start + length + 5]
    rnd.shuffle(nums)
    assert longest_consecutive(nums) == length


def test_longest_consecutive_empty():
    assert longest_consecutive([]) == len([])


def test_majority_elements_found():
    assert majority_elements([2, 3, 2, 2, 2, 2, 4]) == [2]


def test_majority_elements_none():
    assert majority_elements([1, 2]) == []


@given(st.integers(0, 20), st.integers(0, 20))
def test_max_consecutive_ones(left, right):
    nums = [1] * left + [0, 0] + [1] * right
    assert max_consecutive_ones(nums) == max(left, right)


@given(st.integers(1, 50), st.data(), st.randoms())
def test_missing_number(n, data, rnd):
    missing = data.draw(st.integers(0, n))
    nums = [x for x in range(n + 1) if x != missing]
    rnd.shuffle(nums)
    assert missing_number(nums) == missing


def test_rearrange_by_sign_source_example():
    assert rearrange_by_sign([3, 1, -2, -5, 2, -4]) == [3, -2, 1, -5, 2, -4]


@given(
    st.lists(st.integers(1, 100), min_size=1, max_size=10),
    st.data(),
    st.randoms(),
)
def test_rearrange_by_sign_alternates(positives, data, rnd):
    negatives = data.draw(
        st.lists(st.integers(-100, 0), min_size=len(positives), max_size=len(positives))
    )
    nums = positives + negatives
    rnd.shuffle(nums)
    result = rearrange_by_sign(nums)
    assert result[0::2] == [x for x in nums if x > 0]
    assert result[1::2] == [x for x in nums if x <= 0]


def test_rearrange_by_sign_unbalanced():
    with pytest.raises(ValueError):
        rearrange_by_sign([1, 2, 3, -1])


@given(st.lists(st.sampled_from([0, 1, 2])))
def test_sort_colors_sorted(nums):
    assert sort_colors(nums) == sorted(nums)


def test_sort_colors_rejects_other_values():
    with pytest.raises(ValueError):
        sort_colors([0, 3, 1])


@given(st.lists(st.integers(), max_size=15), st.integers(), st.randoms())
def test_single_number(pairs, lone, rnd):
    nums = pairs + pairs + [lone]
    rnd.shuffle(nums)
    assert single_number(nums) == lone


@given(st.integers(0, 30))
def test_count_subarrays_singletons(n):
    assert count_subarrays_with_sum([5] * n, 5) == n


@given(st.lists(st.integers(1, 20), min_size=1, max_size=20))
def test_count_subarrays_whole_sum(nums):
    assert count_subarrays_with_sum(nums, sum(nums)) == 1