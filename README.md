# varcalc

A small HTTP service that evaluates a list of instructions. Each instruction
either assigns the result of an arithmetic operation to a variable or asks for
a variable's value to be printed. Independent calculations run concurrently on
a pool of worker threads. A calculation that depends on other variables runs
as soon as those variables have values.

## Installing

```
pip install .
```

## Running the server

```
varcalc-server
```

Options:

- `--host` (default `0.0.0.0`)
- `--port` (default `8080`)
- `--delay` seconds spent on each operation (default `0.05`)
- `--workers` number of worker threads (default `10`)

The server answers two routes:

- `POST /api/v1/solve` evaluates a batch of instructions.
- `GET /swagger/doc.json` returns a Swagger 2.0 description of the API as JSON.

Any other path gets status 404.

## Instructions

A request body is a JSON array of instructions:

```json
[
  {"type": "calc", "var": "x", "op": "+", "left": 10, "right": 2},
  {"type": "calc", "var": "y", "op": "*", "left": "x", "right": 5},
  {"type": "print", "var": "y"}
]
```

- `type` is `calc` or `print`.
- `var` names the variable to assign or print. It must not be empty.
- `op` is one of `+`, `-` or `*`. It is needed only for `calc`.
- `left` and `right` are numbers or names of other variables. They are needed
  only for `calc`. Fractional numbers are cut to integers.

A successful response lists the printed variables in the order their values
were computed:

```json
{"items": [{"var": "y", "value": 60}]}
```

Work stops as soon as every printed variable has a value, or when nothing more
can be computed. A printed variable that never gets a value does not appear in
the reply. A name that is never assigned is not an error in itself: the
calculations that use it are simply never run.

Errors:

- A body that is not a JSON array of objects, or that has a non-string
  `type`, `var` or `op`, gets status 400 with
  `{"status": "", "code": "VALIDATION_ERROR", "message": "invalid json body, ..."}`.
- An instruction that fails validation, such as an unknown type, an
  unsupported operator, an empty variable name or an empty operand, rejects
  the whole batch. The reply has status 500 and its body is the error message
  as a JSON string.

## Using the library

```python
from varcalc.dto import Instruction
from varcalc.server import build_processor

processor = build_processor(delay=0.0, workers=4)
results = processor.process([
    Instruction.from_dict({"type": "calc", "var": "x", "op": "-", "left": 20, "right": 7}),
    Instruction.from_dict({"type": "print", "var": "x"}),
])
for pair in results:
    print(pair.key, pair.value)
```

`ConcurrentProcessor.process` raises `varcalc.validator.ValidationError` for a
malformed batch.

`varcalc.server.CalculatorApi.handle` takes a raw request body, as `bytes` or
`str`, and returns the HTTP status and the JSON payload. You can use the
service logic without a network server. `make_server` returns a bound
`ThreadingHTTPServer` for an API instance, and `swagger_document` returns the
API description as a dictionary.

## Limitations

The service speaks only JSON over HTTP. It has no other transport and keeps no
state between requests. The API description is served only as a JSON document.
There is no browsable documentation page.

## Running the tests

```
pip install .[test]
pytest
```