"""Validation models — predicate names, field specs, options and report structure.

Configuration arrives in the same shape form authors write it in:

    {
        "year": {"types": ["numeric"], "rules": [["greater_than", [0]]]},
    }

Unknown predicate names or missing rule arguments are rejected here, when the
options are built, so the engine only ever sees well-formed specs.
"""

from enum import Enum
from typing import Iterator, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, model_validator

Number = Union[int, float]


class TypeName(str, Enum):
    """Named type predicates recognized in configuration."""

    NUMBER = "number"
    NUMERIC = "numeric"                    # String with parsable integer content
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"                      # Mapping or None, never a list
    POSITIVE_INTEGER = "positive_integer"
    CURRENT_YEAR_OR_NUMBER = "current_year_or_number"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


class RuleName(str, Enum):
    """Named rule predicates recognized in configuration."""

    NO_RULE = "no_rule"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    BETWEEN = "between"
    EQUAL_TO = "equal_to"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")


# Minimum number of arguments each rule reads
RULE_ARITY = {
    RuleName.NO_RULE: 0,
    RuleName.GREATER_THAN: 1,
    RuleName.LESS_THAN: 1,
    RuleName.BETWEEN: 2,
    RuleName.EQUAL_TO: 1,
}


class RuleSpec(BaseModel):
    """One configured rule: a rule name plus its numeric arguments."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: RuleName
    args: tuple[Number, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _from_pair(cls, data):
        # Accept the wire form ["between", [1, 10]]
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError("rule must be a [name, args] pair")
            name, args = data
            return {"name": name, "args": args}
        return data

    @model_validator(mode="after")
    def _check_arity(self) -> "RuleSpec":
        required = RULE_ARITY[self.name]
        if len(self.args) < required:
            raise ValueError(
                f"rule '{self.name.value}' needs {required} argument(s), got {len(self.args)}"
            )
        return self


class FieldSpec(BaseModel):
    """Types and rules configured for a single field."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    types: tuple[TypeName, ...] = ()
    rules: tuple[RuleSpec, ...] = ()


class ValidationOptions(RootModel[dict[str, FieldSpec]]):
    """Mapping of field name → FieldSpec supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    def __getitem__(self, field: str) -> FieldSpec:
        return self.root[field]

    def __contains__(self, field: object) -> bool:
        return field in self.root

    def __iter__(self) -> Iterator[str]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def get(self, field: str) -> Optional[FieldSpec]:
        return self.root.get(field)


class ValidationReport(BaseModel):
    """Summary of one engine run."""

    passed: bool = Field(description="True if no field recorded an error")
    error_count: int = Field(description="Total number of error messages")
    invalid_fields: list[str] = Field(default_factory=list)
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def build(cls, errors: dict[str, list[str]]) -> "ValidationReport":
        """Build a report from an engine's error map."""
        error_count = sum(len(messages) for messages in errors.values())
        return cls(
            passed=error_count == 0,
            error_count=error_count,
            invalid_fields=list(errors),
            errors={field: list(messages) for field, messages in errors.items()},
        )
