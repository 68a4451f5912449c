r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

from itertools import count as counter
from typing import Any, Dict, Iterator, Optional

import numpy as np
from faker import Faker
from serqy import Series, from_values, from_pairs


class Generator:
    """turns a schema into records using faker providers."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'") from None
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "choice":
            choice_result = self._rng.choice(config["from"])
            # numpy scalars back to python types
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)
            generated_obj = {}
            for k, v in schema.items():
                # refs can see the parent context and earlier siblings
                generated_obj[k] = self.create(v, {**current_context, **generated_obj})
            return generated_obj

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self) -> Iterator[Any]:
        """endless generator of records"""
        for _ in counter():
            yield self._generator.create(self._schema)

    def take(self, count: int) -> Series:
        """a baked series of `count` records keyed 0..count-1"""
        return from_values([self._generator.create(self._schema) for _ in range(count)], baked=True)

    def keyed(self, key_field: str, count: int) -> Series:
        """a baked series of `count` records keyed by one of their own fields"""
        records = [self._generator.create(self._schema) for _ in range(count)]
        return from_pairs([(record[key_field], record) for record in records], baked=True)

    def stream(self) -> Series:
        """an unbaked series over an endless generator. only ever consume part of it."""
        return from_values(self.records())


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
