import threading

import pytest

from firefly2d.geometry import Vec2
from firefly2d.variables import (
    BoolVar,
    DoubleVar,
    IntVar,
    UIntVar,
    Variable,
    Vector2Var,
)


def test_defaults():
    assert BoolVar().get() is False
    assert IntVar().get() == 0
    assert UIntVar().get() == 0
    assert DoubleVar().get() == 0.0
    assert Vector2Var().get() == Vec2(0.0, 0.0)
    assert Variable().get() is None


def test_initial_values_are_kept():
    assert BoolVar(True).get() is True
    assert IntVar(-7).get() == -7
    assert DoubleVar(2.5).get() == 2.5
    assert Vector2Var((1, 2)).get() == Vec2(1.0, 2.0)


def test_set_coerces_types():
    flag = BoolVar()
    flag.set(1)
    assert flag.get() is True
    number = DoubleVar()
    number.set(3)
    assert isinstance(number.get(), float) and number.get() == 3.0


def test_int_truncates_float():
    assert IntVar(3.9).get() == 3


def test_int_rejects_string():
    with pytest.raises(TypeError):
        IntVar("5")


def test_bind_shares_value_both_ways():
    a, b = IntVar(1), IntVar(2)
    b.bind(a)
    assert b.get() == 1
    b.set(10)
    assert a.get() == 10
    a.set(20)
    assert b.get() == 20


def test_rebind_detaches_from_previous():
    a, b, c = DoubleVar(1.0), DoubleVar(2.0), DoubleVar(3.0)
    c.bind(a)
    c.bind(b)
    c.set(9.0)
    assert a.get() == 1.0
    assert b.get() == 9.0


def test_in_place_ops_keep_binding():
    a = IntVar(5)
    b = IntVar()
    b.bind(a)
    b += 3
    assert isinstance(b, IntVar)
    assert a.get() == 8
    b -= 8
    assert a.get() == 0


def test_int_bit_ops():
    v = IntVar(0b1100)
    v &= 0b1010
    assert v.get() == 0b1100 & 0b1010
    v |= 0b0001
    assert v.get() == (0b1100 & 0b1010) | 0b0001
    v ^= 0b1001
    assert v.get() == ((0b1100 & 0b1010) | 0b0001) ^ 0b1001


def test_uint_wraps_below_zero():
    v = UIntVar(0)
    v -= 1
    assert v.get() == 2**64 - 1
    v += 1
    assert v.get() == 0


def test_bind_wrong_type_raises():
    with pytest.raises(TypeError):
        IntVar().bind(UIntVar())
    with pytest.raises(TypeError):
        DoubleVar().bind(IntVar())


def test_double_ops():
    d = DoubleVar(2.0)
    d *= 4.0
    d /= 2.0
    d += 0.5
    d -= 1.0
    assert d.get() == pytest.approx(3.5)
    assert float(d) == d.get()


def test_bool_truthiness():
    assert not BoolVar()
    assert BoolVar(True)


def test_vector_components_and_ops():
    v = Vector2Var(Vec2(2.0, 3.0))
    assert (v.x, v.y) == (2.0, 3.0)
    v += (1.0, 1.0)
    v *= Vec2(2.0, 2.0)
    v /= (2.0, 2.0)
    v -= Vec2(1.0, 1.0)
    assert v.get() == Vec2(2.0, 3.0)


def test_vector_bind_shares_both_components():
    a, b = Vector2Var((1.0, 2.0)), Vector2Var()
    b.bind(a)
    b.set((5.0, 6.0))
    assert a.get() == Vec2(5.0, 6.0)


def test_concurrent_increments_are_not_lost():
    counter = IntVar()
    shared = IntVar()
    shared.bind(counter)

    def work(var):
        for _ in range(2000):
            var += 1

    threads = [threading.Thread(target=work, args=(v,)) for v in (counter, shared) * 2]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert counter.get() == 2000 * len(threads)