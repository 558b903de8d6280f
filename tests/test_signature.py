"""Tests for class-name encoding and generic clause synthesis."""

import itertools
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from lambdagen.naming import group_runs, param_fragment
from lambdagen.signature import OperatorSignature, SignatureSpec, SupplierSignature
from lambdagen.types import (
    GenerationError, Kind,
    PREDICATE, BOOLEAN, BYTE, CHAR, INT, LONG, DOUBLE, OBJECT,
)


class TestParamFragment:
    def test_single(self):
        assert param_fragment([INT]) == "Int"

    def test_two_runs_of_two(self):
        assert param_fragment([BOOLEAN, BOOLEAN, LONG, LONG]) == "TwBooleanTwLong"

    def test_run_of_three(self):
        assert param_fragment([OBJECT, OBJECT, OBJECT, INT]) == "TriObjectInt"

    def test_all_same_collapses(self):
        assert param_fragment([LONG, LONG, LONG, LONG]) == "Long"

    def test_alternating(self):
        assert param_fragment([INT, LONG, INT, LONG]) == "IntLongIntLong"

    def test_empty(self):
        with pytest.raises(GenerationError):
            param_fragment([])

    def test_group_runs(self):
        assert group_runs([INT, INT, LONG, INT]) == [(INT, 2), (LONG, 1), (INT, 1)]


class TestClassName:
    def test_function(self):
        spec = SignatureSpec.of(INT, BOOLEAN)
        assert spec.class_name(False) == "SingleFunctionBooleanToInt"
        assert spec.class_name(True) == "SingleFunctionBooleanToIntThrow"
        assert spec.kind is Kind.FUNCTION
        assert spec.method_name == "apply"

    def test_consumer(self):
        spec = SignatureSpec.of(None, OBJECT, LONG)
        assert spec.class_name(False) == "TwiceConsumerObjectLong"
        assert spec.kind is Kind.CONSUMER
        assert spec.method_name == "accept"

    def test_predicate_single_run(self):
        spec = SignatureSpec.of(PREDICATE, LONG, LONG, LONG, LONG)
        assert spec.class_name(False) == "QuadruplePredicateLong"
        assert spec.kind is Kind.PREDICATE
        assert spec.method_name == "test"

    def test_boolean_return_is_predicate(self):
        assert SignatureSpec.of(BOOLEAN, INT).class_name() == "SinglePredicateInt"

    def test_mixed_runs(self):
        spec = SignatureSpec.of(None, OBJECT, OBJECT, BOOLEAN, LONG)
        assert spec.class_name(True) == "QuadrupleConsumerTwObjectBooleanLongThrow"
        spec = SignatureSpec.of(DOUBLE, OBJECT, OBJECT, OBJECT, INT)
        assert spec.class_name(True) == "QuadrupleFunctionTriObjectIntToDoubleThrow"

    def test_none_parameters_are_dropped(self):
        spec = SignatureSpec.of(LONG, INT, DOUBLE, None, None)
        assert spec.arity == 2
        assert spec.class_name() == "TwiceFunctionIntDoubleToLong"

    def test_arity_zero_is_fatal(self):
        with pytest.raises(GenerationError):
            SignatureSpec.of(INT)

    def test_arity_five_is_fatal(self):
        with pytest.raises(GenerationError):
            SignatureSpec.of(INT, INT, INT, INT, INT, INT)

    def test_predicate_parameter_is_fatal(self):
        with pytest.raises(GenerationError):
            SignatureSpec.of(INT, PREDICATE)

    def test_determinism(self):
        a = SignatureSpec.of(CHAR, OBJECT, INT, INT)
        b = SignatureSpec.of(CHAR, OBJECT, INT, INT)
        assert a == b
        assert hash(a) == hash(b)
        for throwing in (False, True):
            assert a.class_name(throwing) == b.class_name(throwing)
            assert a.generic_declaration(throwing) == b.generic_declaration(throwing)

    def test_names_unique_per_return(self):
        alphabet = [BOOLEAN, INT, LONG, DOUBLE, OBJECT]
        names = set()
        count = 0
        for arity in range(1, 5):
            for params in itertools.product(alphabet, repeat=arity):
                names.add(SignatureSpec(LONG, params).class_name())
                count += 1
        assert len(names) == count


class TestOperatorName:
    def test_byte_twice(self):
        op = OperatorSignature.of(BYTE, 2)
        assert op.class_name(False) == "ByteTwiceOperator"
        assert op.class_name(True) == "ByteTwiceOperatorThrow"
        assert op.kind is Kind.OPERATOR
        assert op.method_name == "apply"

    def test_boolean_operator_is_not_predicate(self):
        op = OperatorSignature.of(BOOLEAN, 1)
        assert op.class_name() == "BooleanSingleOperator"
        assert op.method_name == "apply"
        assert op.returns_boolean

    def test_object_operator_generics(self):
        op = OperatorSignature.of(OBJECT, 4)
        assert op.class_name() == "ObjectQuadrupleOperator"
        assert op.generic_declaration(False) == "<T, U, V, O, R>"

    def test_bad_arity(self):
        with pytest.raises(GenerationError):
            OperatorSignature.of(INT, 0)
        with pytest.raises(GenerationError):
            OperatorSignature.of(INT, 5)

    def test_missing_element(self):
        with pytest.raises(GenerationError):
            OperatorSignature.of(None, 2)

    def test_operator_differs_from_function(self):
        assert OperatorSignature.of(INT, 2) != SignatureSpec.of(INT, INT, INT)


class TestSupplierName:
    def test_primitive(self):
        supplier = SupplierSignature(INT)
        assert supplier.class_name(False) == "IntSupplier"
        assert supplier.class_name(True) == "IntSupplierThrow"
        assert supplier.method_name == "getAsInt"
        assert supplier.generic_declaration(False) == ""

    def test_object(self):
        supplier = SupplierSignature(OBJECT)
        assert supplier.method_name == "get"
        assert supplier.generic_declaration(False) == "<R>"
        assert supplier.generic_declaration(True) == "<R, E extends Exception>"

    def test_predicate_rejected(self):
        with pytest.raises(GenerationError):
            SupplierSignature(PREDICATE)


class TestGenericClauses:
    def test_full_generic_throwing(self):
        spec = SignatureSpec.of(OBJECT, OBJECT, OBJECT)
        assert spec.generic_declaration(True) == "<T, U, R, E extends Exception>"
        assert spec.generic_definition(True) == "<T, U, R, E>"
        assert spec.generic_wildcard(True) == "<?, ?, ?, ?>"

    def test_full_generic_non_throwing(self):
        spec = SignatureSpec.of(OBJECT, OBJECT, OBJECT)
        assert spec.generic_declaration(False) == "<T, U, R>"
        assert spec.generic_definition(False) == "<T, U, R>"
        assert spec.generic_wildcard(False) == "<?, ?, ?>"

    def test_generic_letter_follows_position(self):
        spec = SignatureSpec.of(None, INT, OBJECT)
        assert spec.generic_declaration(False) == "<U>"
        assert spec.param_declaration() == "int v1, U v2"

    def test_primitive_only_is_empty(self):
        spec = SignatureSpec.of(INT, BOOLEAN, LONG)
        assert not spec.has_generic(False)
        assert spec.generic_declaration(False) == ""
        assert spec.generic_definition(False) == ""
        assert spec.generic_wildcard(False) == ""

    def test_throwing_always_has_exception_parameter(self):
        spec = SignatureSpec.of(INT, BOOLEAN)
        assert spec.has_generic(True)
        assert spec.generic_declaration(True) == "<E extends Exception>"
        assert spec.generic_definition(True) == "<E>"
        assert spec.generic_wildcard(True) == "<?>"

    def test_throw_mode_monotonicity(self):
        alphabet = [BOOLEAN, LONG, OBJECT]
        for return_token in (None, PREDICATE, INT, OBJECT):
            for arity in range(1, 5):
                for params in itertools.product(alphabet, repeat=arity):
                    spec = SignatureSpec(return_token, params)
                    assert spec.has_generic(True)
                    if spec.has_generic(False):
                        assert spec.generic_declaration(False) != ""
                    else:
                        assert spec.generic_declaration(False) == ""
                        assert spec.generic_wildcard(False) == ""

    def test_no_dangling_separator(self):
        spec = SignatureSpec.of(OBJECT, OBJECT, INT)
        for throwing in (False, True):
            for clause in (spec.generic_declaration(throwing), spec.generic_definition(throwing),
                           spec.generic_wildcard(throwing)):
                assert not clause.endswith(", >")
                assert ", ," not in clause


class TestParameters:
    def test_declaration_and_invocation(self):
        spec = SignatureSpec.of(None, OBJECT, LONG, OBJECT)
        assert spec.param_declaration() == "T v1, long v2, V v3"
        assert spec.param_invocation() == "v1, v2, v3"

    def test_single(self):
        spec = SignatureSpec.of(INT, DOUBLE)
        assert spec.param_declaration() == "double v1"
        assert spec.param_invocation() == "v1"

    def test_generic_count(self):
        assert SignatureSpec.of(None, OBJECT, LONG, OBJECT).generic_count == 2
        assert SignatureSpec.of(None, LONG).generic_count == 0
