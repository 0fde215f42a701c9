"""Tests for the tagged-union core shared by Option and Result."""

import msgspec
import pytest

from fp_toolkit import Err, ExhaustiveMatchError, Nothing, NothingType, Ok, Some, option, result
from fp_toolkit._tagged import force, resolve, tag_of, unreachable


class TestTags:
    """Tests for discriminants."""

    def test_tag_is_variant_name(self):
        assert tag_of(Ok(1)) == 'Ok'
        assert tag_of(Err('e')) == 'Err'
        assert tag_of(Some(1)) == 'Some'
        assert tag_of(Nothing) == 'Nothing'

    def test_tag_of_untagged_value_is_rejected(self):
        with pytest.raises(ExhaustiveMatchError):
            tag_of(42)  # type: ignore[arg-type]


class TestSerialization:
    """Variants serialize as msgspec tagged objects."""

    def test_encode_result(self):
        assert msgspec.json.encode(Ok(1)) == b'{"tag":"Ok","value":1}'
        assert msgspec.json.encode(Err('boom')) == b'{"tag":"Err","error":"boom"}'

    def test_encode_option(self):
        assert msgspec.json.encode(Some([1, 2])) == b'{"tag":"Some","value":[1,2]}'
        assert msgspec.json.encode(Nothing) == b'{"tag":"Nothing"}'

    def test_decode_result_union(self):
        decoded = msgspec.json.decode(b'{"tag":"Err","error":"boom"}', type=Ok | Err)
        assert decoded == Err('boom')

    def test_decode_option_union(self):
        decoded = msgspec.json.decode(b'{"tag":"Nothing"}', type=Some | NothingType)
        assert decoded == Nothing

    def test_msgpack_roundtrip(self):
        packed = msgspec.msgpack.encode(Ok({'id': 7}))
        assert msgspec.msgpack.decode(packed, type=Ok | Err) == Ok({'id': 7})


class TestHandlers:
    """Tests for handler resolution."""

    def test_resolve_calls_callables(self):
        assert resolve(lambda n: n + 1, 1) == 2

    def test_resolve_returns_plain_values(self):
        assert resolve('fallback', 1) == 'fallback'

    def test_force(self):
        assert force(lambda: 3) == 3
        assert force(3) == 3

    def test_unreachable_raises(self):
        with pytest.raises(ExhaustiveMatchError, match='unreachable variant'):
            unreachable(object())

    def test_exhaustive_match_error_is_a_type_error(self):
        assert issubclass(ExhaustiveMatchError, TypeError)


class TestExhaustiveness:
    """Matchers reject values outside their closed set of variants."""

    def test_result_match_rejects_foreign_value(self):
        matcher = result.match(ok=1, err=2)
        with pytest.raises(ExhaustiveMatchError):
            matcher(Some(1))  # type: ignore[arg-type]

    def test_option_match_rejects_foreign_value(self):
        matcher = option.match(some=1, none=2)
        with pytest.raises(ExhaustiveMatchError):
            matcher('not an option')  # type: ignore[arg-type]

    def test_match_rejects_missing_case(self):
        with pytest.raises(TypeError):
            option.match(some=1)  # type: ignore[call-arg]
