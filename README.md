# sincap

Small helpers for building web services: parsing list-query parameters,
converting and comparing values, date helpers, field validators, request
helpers and a few server-side utilities. The only third-party dependency is
`xmltodict`, used to read XML request bodies.

## Modules

### `sincap.qapi`

Parses list-endpoint query parameters (`_q`, `_fields`, `_preloads`,
`_offset`, `_limit`, `_sort`, `_filter`).

- `Filter.parse("age>=35")` returns a `Filter` with `name`, `operation` and
  `value`. Operators are `=`, `!=`, `<`, `<=`, `>`, `>=`, `~=`, `|=` and
  `*=`, mapped to the `Operation` enum (`EQ`, `NEQ`, `LT`, `LTE`, `GT`,
  `GTE`, `LK`, `IN`, `IN_ALT`). It raises `ParamLengthError`,
  `InvalidOperatorError` or `MissingNameValueError`, all subclasses of
  `FilterError`.
- `Sort.parse("-name")` returns a `Sort` with a `Direction` (`DSC` for `-`,
  `ASC` for `+` or a space) and a `name`; `str(sort)` gives `"name desc"`.
  Bad input raises `SortError`.
- `Query.parse(params)` fills a `Query` (`q`, `fields`, `preloads`, `offset`,
  `limit`, `sort`, `filter`, `total_count`). `offset` and `limit` default to
  `-1`. Sorts and filters that fail to parse are kept as empty entries rather
  than raising. When no parameter holds a usable value it raises
  `QueryNotFoundError`; `Query.from_params(params)` returns the defaults
  instead. All these errors derive from `QueryError`, a `ValueError`.

```python
from sincap.qapi import Query

query = Query.parse({
    "_q": "nissan",
    "_fields": "manufacturer,model",
    "_offset": "10",
    "_limit": "5",
    "_sort": "-manufacturer,+model",
    "_filter": "name=seray,active!=true",
})
print(query.sort)     # ['manufacturer desc', 'model asc']
print(query.filter[0].name, query.filter[0].operation)   # name EQ
```

### `sincap.typeutils`

- `to_string(value)`: strings unchanged, booleans as `true`/`false`, floats
  with six decimals, `None` as an empty string.
- `map_values_as_strings(data)` and `map_keys_as_strings(data)`.
- `slice_contains(items, element)` and `slice_contains_deep(items, element)`:
  membership by type and equality; the deep form also compares nested lists,
  tuples and mappings, while the plain form raises `TypeError` for them.
- `slice_of_string(item, count)`.
- `parse_uint(value)` parses a decimal unsigned 32-bit integer and raises
  `ValueError` otherwise; `format_uint(value)` formats one.

### `sincap.timeutils`

`time_bod` and `time_bom` (start of day and of month, keeping the timezone),
`time_mon_sun_weekday` (Monday is 0, Sunday 6), `date_equal`, `parse_unix`
(milliseconds since the epoch as a string, to a UTC `datetime`) and
`days_in_month(month, year)`.

### `sincap.randomstr`

`get_string(length=32)` returns a random string of ASCII letters.

### `sincap.resources`

- `Resource` holds two random context keys, `path_param_ctx_key` and
  `body_ctx_key`; `Resource.new()` creates one. `new_context_key()` returns a
  fresh 32-character key.
- `query_to_map(values)` keeps the first value of each multi-valued
  parameter.
- `body_to_map(body, content_type)` decodes `application/json` or
  `application/vnd.api+json` bodies into a dict, and `application/xml` or
  `text/xml` bodies into a dict without their root element. Other content
  types give an empty dict; malformed bodies raise `ValueError`.

### `sincap.netutils`

- `read_user_ip(headers, remote_ip)` takes the client address from
  `X-Real-Ip`, then `X-Forwarded-For`, then `remote_ip`, and drops any port.
- `apply_security_headers(headers)` sets the entries of `SECURITY_HEADERS`
  (cache control, `X-Frame-Options: DENY` and the like) on a mutable mapping
  and returns it.

### `sincap.validator`

`is_iban`, `is_phone` and `is_plate` check a string (an empty IBAN passes).
`validate(value, rule)` applies comma-separated rule names (`iban`, `phone`,
`plate`), returns the value, and raises `ValidationError` when a rule fails
or `ValueError` for an unknown rule.

### `sincap.middlewares`

- `parse_qapi(query_params)` builds a `Query` from request parameters,
  returning defaults when none are given.
- `check_forbidden_fields(record, forbidden_fields)` returns the record or
  raises `ForbiddenFieldError` (with `status` 422) for the first forbidden
  field it holds.

### `sincap.server`

- `ServerConfig` with `host()` returning `domain:port`.
- `Route`, `clean_route(path)` and `collect_routes(pairs)`, which strip
  `/*` segments and a trailing slash from `(method, path)` pairs.
- `FileServerConfig(folder, path)` with `resolve(work_dir=None)`, and
  `validate_file_server_path(path)`, which rejects paths holding `{`, `}` or
  `*`.
- `RequestMetrics`: `record(route, method, duration_ns, status)` keeps a
  uniform sample (1028 values by default) of durations per route and method
  and a count per status; read them with `histogram(route, method)` and
  `status_count(status)`.

## What it does not do

The package runs no HTTP server and has no router or middleware chain of its
own: the helpers above take plain mappings and values and are meant to be
called from whatever web framework you use. `FileServerConfig` only resolves
folders; it serves no files. `RequestMetrics` only collects numbers; it does
not time requests by itself or publish the results. There is no database
access or storage layer.

## Installing

```
pip install .
```

With the test tools:

```
pip install ".[test]"
pytest
```