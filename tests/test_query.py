"""
Tests for query expansion and operator helpers
"""
import pytest
from bson.objectid import ObjectId

from mongoext import Int, expand_query, not_


class TestExpandQuery:
    """Test expand_query()."""

    def test_none(self):
        """Test None passes through."""
        assert expand_query(None) is None

    def test_empty_values(self):
        """Test empty queries pass through."""
        assert expand_query('') == ''
        assert expand_query({}) == {}

    def test_object_id(self):
        """Test an ObjectId becomes an _id match."""
        oid = ObjectId()
        assert expand_query(oid) == {'_id': oid}

    def test_hex_string(self):
        """Test a 24-hex string becomes an _id match."""
        result = expand_query('56f6ca7e7f74b4fb3e3f7daf')
        assert result == {'_id': ObjectId('56f6ca7e7f74b4fb3e3f7daf')}
        assert isinstance(result['_id'], ObjectId)

    def test_uppercase_hex_string(self):
        """Test uppercase hex digits are accepted."""
        result = expand_query('56F6CA7E7F74B4FB3E3F7DAF')
        assert result == {'_id': ObjectId('56f6ca7e7f74b4fb3e3f7daf')}

    def test_non_matching_strings(self):
        """Test other strings pass through."""
        for query in ['Barcelona', '56f6ca7e7f74b4fb3e3f7da', '56f6ca7e7f74b4fb3e3f7dag',
                      '56f6ca7e7f74b4fb3e3f7daf\n']:
            assert expand_query(query) == query

    def test_document(self):
        """Test query documents pass through untouched."""
        query = {'city': 'Barcelona'}
        assert expand_query(query) is query


class TestNot:
    """Test not_()."""

    def test_not(self):
        """Test $ne fragment."""
        assert not_(None) == {'$ne': None}

    def test_not_in_query(self):
        """Test composing a query."""
        query = {'corpId': not_(None), 'state': not_(Int(0))}
        assert query == {'corpId': {'$ne': None}, 'state': {'$ne': 0}}


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
