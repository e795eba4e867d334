# psqlkit

Building blocks for producing SQL text across MySQL, PostgreSQL and
SQLite: literal escaping, identifier quoting, WHERE condition rendering,
per-engine dialects, error classification, enum CHECK constraints, and
key and column definitions. It has no dependencies outside the standard
library.

## Installation

```
pip install psqlkit
```

To run the tests:

```
pip install "psqlkit[test]"
pytest
```

## Escaping values

`psqlkit.escape.escape` turns a Python value into an SQL literal:

```python
from psqlkit.escape import escape

escape("it's")        # "'it''s'"
escape(None)          # "NULL"
escape(True)          # "TRUE"
escape(42)            # "42"
escape(3.14)          # "3.14"
escape(b"\xff\x00")   # "x'ff00'"
escape(b"")           # "x''"
```

`datetime` values are converted to UTC and rendered as
`'YYYY-MM-DD HH:MM:SS'` with any fractional microseconds appended;
`datetime.min` renders as `'0000-00-00 00:00:00.000000'`. Objects with an
`escape_value()` method are rendered through it, and objects with a
`value()` method are rendered from what it returns.

## Identifiers and sort fields

```python
from psqlkit.names import F, S, quote_name, format_camel_snake_case

quote_name('has"quote')                 # '"has""quote"'
F("field").escape_value()               # '"field"'
F("table.field").escape_value()         # '"table"."field"'
F("table", "field").escape_value()      # '"table"."field"'
S("name", "DESC").sort_escape_value()   # '"name" DESC'
format_camel_snake_case("userAccount")  # 'User_Account'
```

`F` raises `ValueError` for anything other than one or two arguments, and
`S` raises `ValueError` when called with none.

## WHERE conditions

```python
from psqlkit.escape import escape_where, escape_where_sub, FindInSet

escape_where({"status": "active", "id": [1, 2, 3]}, " AND ")
# '"id" IN(1,2,3) AND "status"=\'active\''

escape_where({"tags": FindInSet(value="go")}, " AND ")
# 'FIND_IN_SET(\'go\',"tags")'

escape_where_sub("qty", {"$gte": 10, "$lt": 20})
# '("qty">=10 AND "qty"<20)'
```

Mapping keys are rendered in sorted order. A value of `None` renders as
`IS NULL`, a list or tuple as `IN(...)`, bytes as an equality with a hex
literal, and a mapping of `$gt`/`$lt`/`$gte`/`$lte` operators as range
comparisons. An empty condition mapping or list renders as `1` (match
everything); an empty list of values or an operator mapping with no known
operator renders as `FALSE`.

## Engines and dialects

```python
from psqlkit.engine import Engine
from psqlkit.dialect import placeholders, get_dialect, default_export_arg

placeholders(Engine.MYSQL, 3, 1)                 # '?,?,?'
get_dialect(Engine.SQLITE).limit_offset(10, 5)   # 'LIMIT 10, 5'
str(Engine.POSTGRESQL)                           # 'PostgreSQL Engine'
default_export_arg(None)                         # None
```

Subclass `Dialect` and pass it to `register_dialect` to change
placeholder style, argument export or LIMIT rendering for an engine;
`DefaultDialect` is used for any engine without a registered one.
Registered dialects may also provide `error_number`/`is_not_exist`,
`is_duplicate`, key rendering (`key_def`, `inline_key_def`,
`create_index`) and type mapping (`sql_type`, `field_def`,
`field_def_alter`) methods, which the rest of the package uses when
present.

## Expressions

```python
from psqlkit.engine import Engine
from psqlkit.expressions import greatest, least
from psqlkit.names import F

greatest(F("count"), 0).escape_value()               # 'GREATEST("count",0)'
least(F("stock"), 100).escape_value(Engine.SQLITE)   # 'MIN("stock",100)'
```

## Errors

`psqlkit.errors` provides:

- `SqlError(query, err)`, wrapping a failure with the query that caused
  it; its text is `While running <query>: <err>`.
- `error_number(err)`: `0` for `None`, the number reported by a
  registered dialect, otherwise `0xFFFF`; it follows `__cause__`.
- `is_not_exist(err)`: true for known "does not exist" error numbers and
  for `FileNotFoundError`.
- `is_duplicate(err)`: true when a registered dialect says so or the
  error number is 1062.
- The exceptions `NotReadyError`, `NotNillableError`,
  `TxAlreadyProcessedError`, `DeleteBadAssertError` and `BreakLoop`.

## Schema helpers

- `psqlkit.enums`: `get_enum_constraint_name` derives a `chk_enum_…`
  name from a hash of comma-separated values, and
  `generate_enum_check_sql` renders the CHECK constraint for every
  column of a table recorded on an `EnumConstraint`.
- `psqlkit.keys`: `StructKey` and `KeyType` describe primary, unique,
  index, fulltext, spatial and vector keys and render their definitions.
- `psqlkit.fields`: `StructField` renders a column's SQL type and its
  full definition, including `NULL`/`NOT NULL`, `DEFAULT` and `COLLATE`.
- `psqlkit.hexvalue`: `Hex` is a `bytearray` that loads from and stores
  as hexadecimal text.

## What it does not do

psqlkit only produces SQL text and metadata. It does not connect to a
database, run queries, manage transactions, map objects to tables or
create and migrate tables, and it has no query builder: you assemble the
statement around the rendered pieces yourself.