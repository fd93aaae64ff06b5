import inspect

import pytest

from oddments.tailcall import tailcall


def _pushed(trace, item):
    trace.append(item)
    return trace


def _stack_depth():
    depth = 0
    frame = inspect.currentframe()
    while frame is not None:
        depth += 1
        frame = frame.f_back
    return depth


def _make_count_down():
    def count_down(n):
        if n == 0:
            return "done"
        return count_down(n - 1)

    count_down = tailcall(count_down)
    return count_down


@pytest.mark.parametrize(
    "n, expected",
    [
        (0, ["0", "1", "2", "3", "4"]),
        (1, ["1", "2", "3", "4"]),
        (2, ["2", "3", "4"]),
        (3, ["3", "4"]),
        (4, ["4"]),
        (50, ["_"]),
    ],
)
def test_general(n, expected):
    def general(n, trace):
        if n == 0:
            trace.append("0")
            return general(1, trace)
        if n == 1:
            trace.append("1")
            return general(2, trace)
        if n == 2:
            return general(3, _pushed(trace, "2"))
        if n == 3:
            # A call used as a plain statement still continues the loop.
            general(4, _pushed(trace, "3"))
        if n == 4:
            trace.append("4")
            return trace
        trace.append("_")
        return trace

    general = tailcall(general)
    assert general(n, []) == expected


def test_stack_does_not_grow():
    def stack_depths(depths):
        if depths is None:
            return stack_depths([])
        depths.append(_stack_depth())
        if len(depths) < 3:
            return stack_depths(depths)
        return depths

    stack_depths = tailcall(stack_depths)
    depths = stack_depths(None)
    assert len(depths) == 3
    assert all(depth == depths[0] for depth in depths[1:])


def test_no_args():
    counter = [0]

    def no_args():
        counter[0] += 1
        if counter[0] < 5:
            return no_args()
        value = counter[0]
        counter[0] = 0
        return value

    no_args = tailcall(no_args)
    assert no_args() == 5
    assert counter[0] == 0


def test_no_explicit_return_type():
    done = [False]

    def no_explicit_return(n):
        if n > 0:
            no_explicit_return(n - 1)
        else:
            done[0] = True

    no_explicit_return = tailcall(no_explicit_return)
    result = no_explicit_return(5)
    assert done[0] is True
    assert result is None


def test_deep_recursion_does_not_overflow():
    count_down = _make_count_down()
    assert count_down(100_000) == "done"


def test_broad_except_does_not_intercept_recursion():
    def swallowing(n):
        try:
            if n > 0:
                return swallowing(n - 1)
        except Exception:
            return "swallowed"
        return "finished"

    swallowing = tailcall(swallowing)
    assert swallowing(3) == "finished"


def test_exception_propagates_and_function_stays_usable():
    def failing(n):
        if n == 0:
            raise ValueError("bottom")
        return failing(n - 1)

    failing = tailcall(failing)
    count_down = _make_count_down()
    with pytest.raises(ValueError, match="bottom"):
        failing(3)
    assert count_down(3) == "done"
    with pytest.raises(ValueError, match="bottom"):
        failing(0)


def test_keyword_arguments_are_carried():
    def accumulate(n, *, total=0):
        if n == 0:
            return total
        return accumulate(n - 1, total=total + n)

    accumulate = tailcall(accumulate)
    assert accumulate(4) == 10


def test_wraps_metadata():
    count_down = _make_count_down()
    assert count_down.__name__ == "count_down"