"""
schema-driven fake records for exercising the colinq containers.

a schema is a dict of field -> spec, where a spec is
  - a faker provider name ('word', 'name', ...)
  - a (provider, kwargs) tuple, e.g. ('pyint', {'min_value': 1, 'max_value': 9})
  - a {'_provider': 'choice', 'from': [...]} / {'_provider': 'ref', 'key': ...} /
    {'_provider': 'literal', 'value': ...} dict
  - a nested schema dict
"""

import numpy as np
from faker import Faker
from typing import Any, Dict, Optional
from colinq import List, Dictionary, Queue


class Generator:
    """schema interpreter backed by faker and a seeded numpy rng."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict, context: Dict) -> Any:
        provider = config['_provider']
        if provider == 'choice':
            # convert numpy scalars back to python values
            choice = self._rng.choice(config['from'])
            return choice.item() if hasattr(choice, 'item') else choice
        if provider == 'ref':
            key = config['key']
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return context[key]
        if provider == 'literal':
            return config['value']
        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}
        if isinstance(schema, dict):
            if '_provider' in schema:
                return self._provider(schema, context)
            record = {}
            for field, spec in schema.items():
                # fields may refer to ones generated before them
                record[field] = self.create(spec, {**context, **record})
            return record
        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])
        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)
        return schema


class _SchemaProvider:
    def __init__(self, schema: Dict, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List:
        """a colinq List of `count` generated records"""
        return List(self._generator.create(self._schema) for _ in range(count))

    def take_queue(self, count: int) -> Queue:
        return Queue(self._generator.create(self._schema) for _ in range(count))

    def take_dictionary(self, count: int, key_field: str) -> Dictionary:
        """records keyed by one of their fields; a repeated key keeps its first position and the last record"""
        result = Dictionary()
        for _ in range(count):
            record = self._generator.create(self._schema)
            result.put(record[key_field], record)
        return result


def from_schema(schema: Dict, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
