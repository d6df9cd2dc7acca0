# herlang

`herlang` compiles programs written in HerLang into C++ source code.

## Installation

```
pip install .
```

## Usage

```
hcp in.herc out.cpp
```

The same command is also available as `python -m herlang.cli in.herc out.cpp`.

The command reads `in.herc` and writes the generated C++ to `out.cpp`. On
success it prints `Compilation successful: out.cpp` and exits with status 0.

Indentation problems are printed on standard error as warnings. Examples are
a block that never reaches `end`, an `end` at the wrong depth, or a line in a
block that is not indented further than the line that opened the block.
Warnings do not stop compilation.

The command exits with status 1 in these cases:

- It is not given exactly two arguments. It prints a usage line.
- The input cannot be read or the output cannot be written.
- The source has a syntax error. It prints `Error: ...` on standard error.

## The language

```
# A comment
function greet name:
    say "Hello, " name
end

start:
    greet "world"
    say "done" end = "!"
end
```

- `function NAME [PARAM]:` ... `end` defines a function with at most one
  parameter. A function with a parameter becomes `void NAME(auto PARAM)`,
  which needs a C++20 compiler to build.
- `start:` ... `end` is the program entry point and becomes `main`.
- `say` prints string literals and variables. By default it ends with
  `std::endl`. `end = "..."` chooses a different ending.
- `set NAME` declares a variable initialised to zero.
- `NAME [ARG]` calls a function. `ARG` is an optional string literal or
  variable.
- Lines whose first non-blank character is `#` are comments.

Generated code puts all function definitions first and the `start` blocks
after them.

## Library use

```python
from herlang.cli import compile_source

cpp_code = compile_source('start:\n    say "hi"\nend\n')
```

The stages can also be used one at a time:

- `herlang.utils.split_lines` splits text into lines.
- `herlang.lexer.lex` turns lines into `Token` objects.
- `herlang.parser.parse` turns tokens into a `herlang.nodes.Program`.
- `herlang.generator.generate_cpp` turns a `Program` into C++ text.
- `herlang.indentation.check_indentation` returns a list of warning strings.

Errors raise these exceptions:

- `herlang.lexer.LexError`, for example for an unterminated string.
- `herlang.parser.ParseError`, for example for a missing `:` or a block
  without `end`.

## What it does not do

- It only writes C++ text. It does not build or run the result.
- `if`, `elif`, `else`, `add`, `minus`, `multiply` and `divide` are reserved
  words, but they are not statements. The parser skips them.
- Characters other than letters, digits, `_`, quotes and `: = ( )` are
  ignored.

## Running the tests

```
pip install .[test]
pytest
```