# tests/unit/test_contract.py
"""
Tests for contract capabilities and structural validation.

Only parameter counts are compared; names appear in messages only.
"""

from __future__ import annotations

import re
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from implkit.core.contract import Contract, capabilities, conformance_errors, validate
from implkit.core.exceptions import ContractViolationError
from implkit.core.signature import Signature

# =============================================================================
# Test Data
# =============================================================================


class StorageContract:
    label = "storage"

    def get(self, key):
        ...

    def put(self, key, value):
        ...

    @staticmethod
    def open(path, mode):
        ...

    @classmethod
    def create(cls, url):
        ...

    def _flush(self):
        ...


class MemoryStorage:
    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def put(self, key, value):
        self.data[key] = value

    @staticmethod
    def open(path, mode):
        return MemoryStorage()

    @classmethod
    def create(cls, url):
        return cls()


# =============================================================================
# Contract
# =============================================================================


class TestContract:
    def test_accepts_callables_names_and_signatures(self):
        contract = Contract(
            "Mixed",
            a=lambda x, y: None,
            b=("x",),
            c=Signature(params=()),
        )

        assert [contract[k].arity for k in contract] == [2, 1, 0]
        assert len(contract) == 3

    def test_signatures_is_a_copy(self):
        contract = Contract("Clock", now=())
        contract.signatures["sleep"] = Signature(params=("s",))

        assert list(contract) == ["now"]

    def test_repr_lists_capabilities(self):
        contract = Contract("Clock", now=(), sleep=("seconds",))
        assert repr(contract) == "Contract('Clock': now(), sleep(seconds))"

    def test_contracts_hash_by_identity(self):
        assert Contract("A") != Contract("A")


# =============================================================================
# capabilities()
# =============================================================================


class TestCapabilities:
    def test_mapping_ignores_non_descriptors(self):
        caps = capabilities({"foo": lambda bar, baz: None, "count": 3, 7: lambda: None})

        assert list(caps) == ["foo"]
        assert caps["foo"].params == ("bar", "baz")

    def test_class_uses_own_public_methods(self):
        caps = capabilities(StorageContract)

        assert sorted(caps) == ["create", "get", "open", "put"]
        assert caps["get"].params == ("key",)
        assert caps["open"].params == ("path", "mode")
        assert caps["create"].params == ("url",)

    def test_class_ignores_inherited_methods(self):
        class Extended(StorageContract):
            def close(self):
                ...

        assert list(capabilities(Extended)) == ["close"]

    def test_object_uses_public_callable_attributes(self):
        contract = SimpleNamespace(send=lambda msg: None, retries=3, _hidden=lambda: None)

        assert list(capabilities(contract)) == ["send"]

    @pytest.mark.parametrize("contract", [{}, object(), lambda a: None, len])
    def test_objects_without_capabilities(self, contract):
        assert capabilities(contract) == {}


# =============================================================================
# Validation
# =============================================================================


class TestValidation:
    def test_missing_member(self):
        contract = {"foo": lambda bar, baz: None}

        with pytest.raises(ContractViolationError, match=re.escape("Instance does not implement foo(bar, baz)")):
            validate(contract, SimpleNamespace())

    def test_non_callable_member(self):
        contract = {"foo": lambda bar, baz: None}

        errors = conformance_errors(contract, SimpleNamespace(foo=1))

        assert errors == ["Instance does not implement foo(bar, baz)"]

    def test_arity_mismatch_names_both_shapes(self):
        contract = {"foo": lambda bar, baz, cb: None}
        instance = SimpleNamespace(foo=lambda bar, baz: None)

        expected = "Instance implements foo(bar, baz) but contract defines foo(bar, baz, cb)"
        with pytest.raises(ContractViolationError, match=re.escape(expected)):
            validate(contract, instance)

    def test_names_are_not_compared(self):
        contract = {"foo": lambda bar, baz, cb: None}
        instance = SimpleNamespace(foo=lambda x, y, z: None)

        assert validate(contract, instance) is instance

    def test_mapping_instance(self):
        contract = Contract("Handler", handle=("event",))
        instance = {"handle": lambda event: event}

        assert validate(contract, instance) is instance

    def test_mapping_items_shadow_dict_methods(self):
        contract = {"get": lambda key: None}
        instance = {"get": lambda key: 1}

        assert conformance_errors(contract, instance) == []
        assert validate(contract, instance) is instance

    def test_mapping_falls_back_to_its_methods(self):
        contract = {"keys": lambda: None}
        instance = {}

        assert validate(contract, instance) is instance

    def test_class_contract_against_instance(self):
        instance = MemoryStorage()
        assert validate(StorageContract, instance) is instance

    def test_class_contract_mismatch(self):
        class Broken(MemoryStorage):
            def put(self, key):
                pass

        expected = "Instance implements put(key) but contract defines put(key, value)"
        with pytest.raises(ContractViolationError, match=re.escape(expected)):
            validate(StorageContract, Broken())

    def test_every_violation_is_reported(self):
        contract = Contract("Pair", a=("x",), b=("y",))

        errors = conformance_errors(contract, SimpleNamespace(a=lambda: None))

        assert errors == [
            "Instance implements a() but contract defines a(x)",
            "Instance does not implement b(y)",
        ]

    def test_uninspectable_member_is_accepted(self):
        contract = Contract("Opaque", run=("job",))
        instance = SimpleNamespace(run=lambda: None)

        with patch("implkit.core.signature.inspect.signature", side_effect=ValueError("opaque")):
            assert conformance_errors(contract, instance) == []

    def test_empty_contract_accepts_anything(self):
        assert validate({}, 42) == 42
