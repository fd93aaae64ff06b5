import pytest

from oddments.ref_count import RefCount, StillShared, WeakRef


class Inner:
    def __init__(self, value):
        self.value = value


@pytest.fixture
def tracked():
    dropped = []

    def make(value=7):
        return RefCount(Inner(value), finalizer=lambda inner: dropped.append(inner.value))

    return make, dropped


def test_basic(tracked):
    make, dropped = tracked
    rc1 = make()
    assert rc1.strong_count() == 1
    assert rc1.value.value == 7

    rc2 = rc1.clone()
    assert rc1.strong_count() == 2
    assert rc2.strong_count() == 2
    assert rc1.value.value == 7
    assert rc2.value.value == 7

    rc1.drop()
    assert rc2.strong_count() == 1
    assert rc2.value.value == 7
    assert dropped == []

    rc2.drop()
    assert dropped == [7]


def test_weak(tracked):
    make, dropped = tracked
    rc1 = make()
    assert rc1.strong_count() == 1
    assert rc1.weak_count() == 0

    w1 = rc1.downgrade()
    assert rc1.strong_count() == 1
    assert w1.strong_count() == 1
    assert rc1.weak_count() == 1
    assert w1.weak_count() == 1

    rc2 = w1.upgrade()
    assert rc2 is not None
    assert rc1.strong_count() == 2
    assert rc2.strong_count() == 2
    assert w1.strong_count() == 2
    assert rc1.weak_count() == 1
    assert rc2.weak_count() == 1
    assert w1.weak_count() == 1
    assert rc2.value.value == 7

    w2 = w1.clone()
    assert rc1.strong_count() == 2
    assert rc2.strong_count() == 2
    assert w1.strong_count() == 2
    assert w2.strong_count() == 2
    assert rc1.weak_count() == 2
    assert rc2.weak_count() == 2
    assert w1.weak_count() == 2
    assert w2.weak_count() == 2

    rc1.drop()
    assert rc2.strong_count() == 1
    assert w1.strong_count() == 1
    assert w2.strong_count() == 1
    assert rc2.weak_count() == 2
    assert dropped == []
    up1 = w1.upgrade()
    up2 = w2.upgrade()
    assert up1 is not None and up2 is not None
    up1.drop()
    up2.drop()

    rc2.drop()
    assert w1.strong_count() == 0
    assert w2.strong_count() == 0
    assert w1.weak_count() == 2
    assert w2.weak_count() == 2
    assert dropped == [7]
    assert w1.upgrade() is None
    assert w2.upgrade() is None

    w1.drop()
    assert w2.strong_count() == 0
    assert w2.weak_count() == 1
    assert dropped == [7]
    assert w2.upgrade() is None


def test_try_unwrap(tracked):
    make, dropped = tracked
    rc1 = make()
    rc2 = rc1.clone()
    w = rc1.downgrade()

    with pytest.raises(StillShared) as excinfo:
        rc2.try_unwrap()
    assert excinfo.value.ref is rc2
    upgraded = w.upgrade()
    assert upgraded is not None
    upgraded.drop()

    rc1.drop()
    inner = rc2.try_unwrap()
    assert w.upgrade() is None
    assert w.strong_count() == 0
    assert w.weak_count() == 1
    assert inner.value == 7
    assert dropped == []


def test_get_mut(tracked):
    make, _ = tracked
    rc1 = make()

    r = rc1.get_mut()
    assert r is not None
    r.value += 1

    rc2 = rc1.clone()
    assert rc1.get_mut() is None
    rc2.drop()

    w = rc1.downgrade()
    assert rc1.get_mut() is None
    w.drop()

    r = rc1.get_mut()
    assert r is not None
    assert r.value == 8


def test_ptr_eq():
    rc = RefCount(Inner(7))
    other = RefCount(Inner(7))
    w = rc.downgrade()
    assert rc.ptr_eq(rc.clone())
    assert not rc.ptr_eq(other)
    assert w.ptr_eq(w.clone())
    assert not w.ptr_eq(other.downgrade())


def test_empty_weak_never_upgrades():
    w = WeakRef()
    assert w.strong_count() == 0
    assert w.weak_count() == 1
    assert w.upgrade() is None


def test_dropped_handle_raises():
    rc = RefCount(3)
    rc.drop()
    with pytest.raises(ValueError):
        rc.drop()
    with pytest.raises(ValueError):
        _ = rc.value
    w = WeakRef()
    w.drop()
    with pytest.raises(ValueError):
        w.upgrade()


def test_context_manager_drops(tracked):
    make, dropped = tracked
    with make(5) as rc:
        assert rc.value.value == 5
    assert dropped == [5]


def test_comparisons_use_values():
    a, b = RefCount(1), RefCount(2)
    assert a < b
    assert b >= a
    assert a == RefCount(1)
    assert hash(a) == hash(1)
    assert sorted([b, a]) == [a, b]