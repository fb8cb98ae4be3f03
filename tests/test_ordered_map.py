import pytest
import os
import sys

# Add the src directory to Python path to import local infmatrix
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from infmatrix import OrderedIntMap


@pytest.fixture
def om() -> OrderedIntMap:
    m = OrderedIntMap()
    for k in (10, -2, 7, 3):
        m[k] = str(k)
    return m


class TestOrderedIntMap:
    """Ordered mapping used for rows and row entries."""

    def test_ordered_iteration(self, om):
        assert list(om) == [-2, 3, 7, 10]
        assert om.values() == ['-2', '3', '7', '10']
        assert om.items()[0] == (-2, '-2')

    def test_overwrite_does_not_duplicate_key(self, om):
        om[7] = 'seven'
        assert len(om) == 4
        assert om[7] == 'seven'

    def test_delete(self, om):
        del om[3]
        assert 3 not in om
        assert list(om) == [-2, 7, 10]
        with pytest.raises(KeyError):
            del om[3]

    def test_pop(self, om):
        assert om.pop(7) == '7'
        assert om.pop(7, None) is None
        with pytest.raises(KeyError):
            om.pop(7)

    def test_find(self, om):
        assert om.find(-2) == 0
        assert om.find(10) == 3
        assert om.find(4) is None

    def test_successor(self, om):
        assert om.successor(-100) == -2
        assert om.successor(3) == 7
        assert om.successor(4) == 7
        assert om.successor(10) is None

    def test_first_last(self, om):
        assert om.first_key() == -2
        assert om.last_key() == 10
        om.clear()
        assert om.first_key() is None
        assert om.last_key() is None
        assert len(om) == 0

    def test_copy(self, om):
        other = om.copy()
        other[100] = 'x'
        assert 100 not in om
        assert len(other) == 5

    def test_get(self, om):
        assert om.get(3) == '3'
        assert om.get(4) is None
        assert om.get(4, 'd') == 'd'
