"""Schema and batch containers.

A batch is a set of equally long columns laid out according to a schema.
Batches are immutable: slicing produces a new batch over a row subrange and
never touches the original.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Sequence


@dataclass(frozen=True)
class Field:
    """One named, typed column of a schema.

    The type tag is opaque to the renderers; it only travels with the field.
    """

    name: str
    type: str = "utf8"
    nullable: bool = True

    def __post_init__(self):
        if not self.name:
            raise ValueError("Field name must be a non-empty string")


@dataclass(frozen=True)
class Schema:
    """Ordered list of fields shared by every batch of one render."""

    fields: tuple[Field, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    @classmethod
    def of(cls, *names: str, type: str = "utf8") -> "Schema":
        """Build a schema of same-typed fields from bare names."""
        return cls(tuple(Field(name, type) for name in names))

    @property
    def names(self) -> list[str]:
        return [f.name for f in self.fields]

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self.fields)


@dataclass(frozen=True)
class Batch:
    """A chunk of rows stored column by column.

    Attributes:
        schema: Schema shared with every other batch of the render.
        columns: One tuple of values per schema field, all of equal length.
    """

    schema: Schema
    columns: tuple[tuple[Any, ...], ...] = field(default=())

    def __post_init__(self):
        columns = tuple(tuple(c) for c in self.columns)
        if len(columns) != len(self.schema):
            raise ValueError(
                f"Batch has {len(columns)} columns, schema has {len(self.schema)} fields"
            )
        lengths = {len(c) for c in columns}
        if len(lengths) > 1:
            raise ValueError(f"Batch columns differ in length: {sorted(lengths)}")
        object.__setattr__(self, "columns", columns)

    @classmethod
    def empty(cls, schema: Schema) -> "Batch":
        """Create a batch with the schema's columns and no rows."""
        return cls(schema, tuple(() for _ in schema.fields))

    @classmethod
    def from_rows(cls, schema: Schema, rows: Iterable[Sequence[Any]]) -> "Batch":
        """Create a batch from row-major data.

        Raises:
            ValueError: If a row does not have one value per field.
        """
        rows = list(rows)
        for i, row in enumerate(rows):
            if len(row) != len(schema):
                raise ValueError(
                    f"Row {i} has {len(row)} values, schema has {len(schema)} fields"
                )
        if not rows:
            return cls.empty(schema)
        return cls(schema, tuple(zip(*rows)))

    @property
    def num_rows(self) -> int:
        if not self.columns:
            return 0
        return len(self.columns[0])

    def row(self, index: int) -> tuple[Any, ...]:
        """Return the values of one row in schema order."""
        return tuple(c[index] for c in self.columns)

    def slice(self, offset: int, length: int) -> "Batch":
        """Return a new batch covering rows [offset, offset + length)."""
        if offset < 0 or length < 0:
            raise ValueError("Slice offset and length must be non-negative")
        end = offset + length
        return Batch(self.schema, tuple(c[offset:end] for c in self.columns))
