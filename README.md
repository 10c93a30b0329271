# schemelet

A small interpreter for a subset of Scheme. It reads a program, splits it
into tokens, builds a parse tree, evaluates every top-level expression in
one global frame and prints the results on one line. Each result is
followed by a space. `define` and `set!` print nothing.

## Supported language

- Integers, decimals such as `2.5` or `-0.75`, strings in double quotes,
  booleans `#t` and `#f`, and symbols
- Comments that run from `;` to the end of the line
- Special forms: `if`, `let`, `letrec`, `quote`, `set!`, `begin`,
  `define`, `lambda`
- Primitives: `+`, `-`, `<`, `>`, `=`, `cons`, `car`, `cdr`

`+` sums its arguments. `-` subtracts the sum of the remaining arguments
from the first. Either gives a decimal when any argument is a decimal.
`<`, `>` and `=` take exactly two numbers. Integers and decimals can be
compared with each other. The condition of `if` must evaluate to a boolean.

## Command line

Installing the package provides the `schemelet` command. With no argument
it reads the program from standard input:

```
echo "(define x 5) (+ x 2.5) (car (quote (1 2 3)))" | schemelet
```

This prints `7.500000 1 `.

You can give a file name instead:

```
schemelet program.scm
```

`python -m schemelet.interpreter` does the same thing.

When a program has a syntax error or fails during evaluation, the command
prints one line and exits with status 1. The line starts with
`Syntax error:` or `Evaluation error:` and gives the reason.

## From Python

```python
from schemelet.interpreter import run, interpret, format_results
from schemelet.tokenizer import tokenize
from schemelet.parser import parse, format_tree

print(run("(let ((x 2) (y 3)) (+ x y))"))      # "5 "

tree = parse(tokenize("(lambda (x) x)"))
print(format_tree(tree))                       # "(lambda (x ) x ) "
print(format_results(interpret(tree)))         # "#<procedure>"
```

The modules:

- `schemelet.tokenizer`
  - `tokenize(text)` returns a list of `Token` objects, each with a `TokenType` and a value.
  - `display_tokens(tokens)` describes each token as `value:type`, one per line.
  - `is_valid_initial(char)` and `is_valid_subsequent(char)` report which characters a symbol may contain.
- `schemelet.parser`
  - `parse(tokens)` builds a list of top-level expressions.
  - `format_tree(tree)` renders that list back as Scheme text.
- `schemelet.evaluator`
  - `evaluate(expr, frame)` evaluates one expression.
  - `apply_closure(function, args)` calls a user-defined procedure with evaluated arguments.
  - `apply_primitive(function, args, frame)` evaluates argument expressions and calls a built-in.
- `schemelet.primitives`
  - `global_frame()` returns a fresh frame with every primitive bound.
  - `add`, `subtract`, `equal`, `less_than`, `greater_than`, `null_p`, `make_pair`, `first` and `rest` are the built-in procedures. Each takes a Python list of arguments. `null_p` is available from Python but is not bound in the global frame.
- `schemelet.interpreter`
  - `interpret(tree)` returns the values of all top-level expressions.
  - `format_results(results)` renders them as the command prints them.
  - `run(text)` does all of these steps in one call.
  - `main(argv=None)` is the entry point for the command.
- `schemelet.values`
  - Data types: `Symbol`, `Pair`, `Closure`, `Primitive` and `Frame`. `Frame` has the methods `lookup` and `define`.
  - List helpers: `cons`, `car`, `cdr`, `is_null`, `length`, `reverse`, `make_list`, `iter_list` and `display`.

Errors are raised as `schemelet.values.SchemeSyntaxError` or
`schemelet.values.EvaluationError`. Both are subclasses of `SchemeError`.

## Limitations

- There is no interactive prompt. The command evaluates one complete program and prints the results once.
- There is no `'` shorthand for `quote` and no dotted-pair syntax in the input. The reader rejects `'`.
- Arithmetic is limited to `+` and `-`. There are no multiplication, division or string primitives.

## Running the tests

```
pip install -e .[test]
pytest
```