# hislang

A small compiler for the His language. It reads a `.herc` source file and
writes an equivalent C++ program, which you can then build with any C++17
compiler.

## Installation

```
pip install .
```

## Usage

```
his in.herc out.cpp
```

The command takes exactly two arguments, the input file and the output file;
otherwise it prints `Usage: hcp in.herc out.cpp` and exits with status 1.

On success it prints `Compilation successful: out.cpp` and exits with status 0.
Indentation problems are reported as `[Warning] ...` lines on standard error
but do not stop compilation. Syntax errors, such as an unterminated string or a
block without `end`, stop compilation: the message is printed as `Error: ...`
on standard error and the exit status is 1. The same status is returned when
the input file cannot be read or the output file cannot be written.

## The language

```
# Lines starting with '#' are comments.

function greet name:
    say "Hello, " name "!"
end

function banner:
    say "=====" end="\n"
end

start:
    banner
    greet "world"
    say "no newline here" end=" "
    say "done"
end
```

- `function NAME [PARAM]:` ... `end` defines a function with at most one
  parameter.
- `start:` ... `end` is the program's entry point.
- `say ARG ...` prints string literals and variables in order. By default it
  ends the line; `end="..."` sets a different ending (`end="\n"` also ends the
  line).
- `set NAME` declares a variable initialised to zero.
- `NAME [ARG]` calls a function with an optional string or variable argument.

All function definitions are written out before the `start` block in the
generated C++.

## What it does not do

- It only writes C++ source; it does not build or run the result.
- The words `if`, `elif`, `else`, `add`, `minus`, `multiply` and `divide` are
  reserved, but no statements are built from them: they produce no output.
- String literals have no escape sequences; a string ends at the next `"`.

## Library use

```python
from hislang.cli import compile_source

cpp = compile_source('start:\n    say "hi"\nend\n')
```

The individual stages are available too:

- `hislang.utils.split_lines` and `hislang.utils.trim`
- `hislang.lexer.lex`, producing `Token` objects with a `TokenType`; raises
  `LexError` on an unterminated string
- `hislang.parser.parse`, producing a `hislang.nodes.Program`; raises
  `ParseError` on malformed input
- `hislang.generator.generate_cpp` and `hislang.generator.escape_string`
- `hislang.indentation.check_indentation`, which prints its warnings to
  standard error and returns them as a list of strings