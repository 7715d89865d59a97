# pmmleval

Pure-Python building blocks for scoring PMML predictive models. The package has
no dependencies outside the standard library.

## Modules

- `pmmleval.utils`: string and number helpers (`to_lower`, `to_double`,
  `split`, `remove_all`, `parse_boolstring`, `trim`, `mkstring`, `format_int`,
  `format_num`), `read_file` for reading a model document as bytes (from the
  first entry of a zip archive when `zipped=True`), and the error hierarchy
  `PmmlError` with its subclasses `ParsingError`, `InvalidValueError`,
  `MissingValueError` and `MathError`.
- `pmmleval.enums`: the enumerations `Closure`, `OpType`,
  `InvalidValueTreatmentMethod`, `MissingValueTreatmentMethod`, `PredicateType`
  and `OutputExpressionType`. Each is parsed with `from_string`, which ignores
  case, and turned back into text with `to_string`. Unknown names raise
  `ParsingError` for `Closure` and `PredicateType`, and fall back to a default
  member for the others.
- `pmmleval.value`: `DataType` and `Value`. A `Value` holds every field value
  as a float (strings get stable numeric codes, booleans become 0 or 1) and may
  be missing. It supports arithmetic, comparison, hashing and set membership
  (`is_in`, `is_not_in`), plus `diff`, `infer_value`, `to_double`,
  `create_values`, `sum_of`, `min_of` and `max_of`.
- `pmmleval.builtins`: `BuiltInFunctionType` and `BuiltInFunction`, the
  built-in functions `+`, `-`, `*`, `/`, `max`, `min`, `sum`, `avg`, `exp`,
  `isMissing`, `isNotMissing`, `equal`, `notEqual`, `lessThan`, `lessOrEqual`,
  `greaterThan`, `greaterOrEqual`, `isIn` and `isNotIn`. Calling a function
  with the wrong number of inputs raises `InvalidValueError`.
- `pmmleval.score`: `InternalScore`, a prediction as text and as a number with
  class probabilities, built with `from_double` or `from_string`.
- `pmmleval.treetable`: `TreeTable` and `TreeTableNode`, a multi-column lookup
  table stored as a tree with one level per column.
- `pmmleval.predicate`: `PredicateOp` and `Predicate` for simple, set and
  compound (`and`, `or`, `xor`, `surrogate`) predicates, evaluated against a
  sample indexed by feature position with `evaluate`, against a single value
  with `evaluate_value`, or turned into a plain function with `compile`.
  `build_interval` turns an `Interval` XML element into a predicate.
- `pmmleval.dag`: `build_dag`, which orders derived fields so that each comes
  after its inputs, drops those whose inputs cannot be provided, and raises
  `ParsingError` on a dependency cycle.
- `pmmleval.scoredistribution`: `ScoreDistribution` (read from
  `ScoreDistribution` XML elements), `get_probabilities`, `get_totals` and
  `TreeScore`, the score of a tree node with probabilities from record counts.
- `pmmleval.normalization`: `NormalizationMethod`, the link functions
  (`logit`, `probit`, `cloglog`, `loglog`, `cauchit`, `closest0or1`), the
  categorical and ordinal normalizations (`categorical_softmax`,
  `categorical_simplemax`, `categorical_none`, `ordinal_logit` and the rest),
  and the builders `build_single_normalization` and
  `build_multi_normalization`.

## Installation

```
pip install .
```

## Example

```python
from xml.etree.ElementTree import Element

from pmmleval.builtins import BuiltInFunction
from pmmleval.dag import build_dag
from pmmleval.normalization import NormalizationMethod, build_multi_normalization
from pmmleval.predicate import Predicate, build_interval
from pmmleval.treetable import TreeTable
from pmmleval.value import Value

plus = BuiltInFunction("+")
print(plus([Value(2.0), Value(3.0)]).value)  # 5.0

above_one = Predicate.simple(0, "greaterThan", Value(1.0))
print(above_one.evaluate([Value(2.0)]))  # True

interval = build_interval(
    Element("Interval", closure="closedOpen", leftMargin="0", rightMargin="10"), 0
)
print(interval.evaluate([Value(5.0)]))  # True

print(build_dag({"b": ["a"], "c": ["b"], "d": ["unknown"]}, {"a"}))  # ['b', 'c']

table = TreeTable()
table.add(["x", "y"], 1)
print(table.get(["x", "y"]))  # 1

softmax = build_multi_normalization(NormalizationMethod.from_string("softmax"))
print(softmax([1.0, 2.0, 3.0]))
```

## What the package does not do

The package provides the parts an evaluator is built from, not an evaluator.
It does not load a whole PMML document into a model, has no tree, regression
or ensemble model classes, no transformation expressions or output fields, and
no command-line tool. `read_file` returns the raw bytes of a document; parsing
it is left to the caller.

## Running the tests

```
pip install ".[test]"
pytest
```