"""
Tests for typed value constructors and identifier helpers
"""
import pytest
from bson.int64 import Int64
from bson.objectid import ObjectId

from mongoext import Double, Id, Int, Long, NumberDouble, NumberInt, ids_equal


class TestInt:
    """Test Int() constructor."""

    def test_int(self):
        """Test wrapping an int."""
        value = Int(3)
        assert isinstance(value, NumberInt)
        assert value == 3

    def test_int_from_string(self):
        """Test parsing a numeric string."""
        assert Int(" 42 ") == 42

    def test_int_from_integral_float(self):
        """Test an integral float is accepted."""
        assert Int(8.0) == 8

    def test_int_rejects_fraction(self):
        """Test a non-integral float is rejected."""
        with pytest.raises(ValueError):
            Int(1.5)

    def test_int_rejects_bool(self):
        """Test booleans are not numbers here."""
        with pytest.raises(TypeError):
            Int(True)

    def test_int_range(self):
        """Test the 32-bit range is enforced."""
        assert Int(2 ** 31 - 1) == 2 ** 31 - 1
        assert Int(-(2 ** 31)) == -(2 ** 31)
        with pytest.raises(ValueError):
            Int(2 ** 31)

    def test_int_rejects_garbage(self):
        """Test unparseable input."""
        with pytest.raises(ValueError):
            Int("three")
        with pytest.raises(TypeError):
            Int([3])

    def test_repr(self):
        """Test string representation."""
        assert repr(Int(3)) == "NumberInt(3)"


class TestLong:
    """Test Long() constructor."""

    def test_long(self):
        """Test wrapping an int as Int64."""
        value = Long(1200000000000)
        assert isinstance(value, Int64)
        assert value == 1200000000000

    def test_long_small_value_stays_int64(self):
        """Test small values are still typed as 64-bit."""
        assert isinstance(Long(1), Int64)

    def test_long_range(self):
        """Test the 64-bit range is enforced."""
        with pytest.raises(ValueError):
            Long(2 ** 63)


class TestDouble:
    """Test Double() constructor."""

    def test_double(self):
        """Test wrapping a float."""
        value = Double(1.75)
        assert isinstance(value, NumberDouble)
        assert value.number == 1.75

    def test_double_from_int(self):
        """Test ints become floats."""
        value = Double(2)
        assert isinstance(value.number, float)
        assert value.number == 2.0

    def test_double_is_not_a_float(self):
        """Test the wrapper is distinct from a raw float."""
        assert not isinstance(Double(1.5), float)

    def test_double_equality(self):
        """Test wrappers compare by payload."""
        assert Double(1.5) == Double("1.5")
        assert Double(1.5) != Double(2.5)

    def test_double_rejects_bool(self):
        """Test booleans are rejected."""
        with pytest.raises(TypeError):
            Double(False)

    def test_double_rejects_garbage(self):
        """Test unparseable input."""
        with pytest.raises(ValueError):
            Double("tall")

    def test_repr(self):
        """Test string representation."""
        assert repr(Double(1.75)) == "Double(1.75)"


class TestId:
    """Test Id() constructor."""

    def test_id_from_hex(self):
        """Test parsing a hex string."""
        value = Id("56f6ca7e7f74b4fb3e3f7daf")
        assert isinstance(value, ObjectId)
        assert str(value) == "56f6ca7e7f74b4fb3e3f7daf"

    def test_new_id(self):
        """Test generating a fresh id."""
        assert Id() != Id()


class TestIdsEqual:
    """Test identifier equality."""

    def test_both_missing(self):
        """Test two missing ids are equal."""
        assert ids_equal(None, None) is True

    def test_one_missing(self):
        """Test a missing id never equals a present one."""
        oid = ObjectId()
        assert ids_equal(oid, None) is False
        assert ids_equal(None, oid) is False

    def test_same_id(self):
        """Test equal ids."""
        oid = ObjectId()
        assert ids_equal(oid, ObjectId(str(oid))) is True

    def test_different_ids(self):
        """Test different ids."""
        assert ids_equal(ObjectId(), ObjectId()) is False

    def test_id_and_hex_string(self):
        """Test an ObjectId equals its string form."""
        assert ids_equal(Id("56f6ca7e7f74b4fb3e3f7daf"), "56f6ca7e7f74b4fb3e3f7daf")


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
