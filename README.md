# crowlang

`crowlang` provides the building blocks of an interpreter for Crow, a small
expression language with integers, booleans, `let` bindings, `if`/`else`
blocks and `return`.

## Installation

```
pip install crowlang
```

## What is in the package

- `crowlang.tokens`: the `TokenType` enumeration, the frozen `Token` record
  (`type` and `literal`) and `lookup_ident`, which tells the keywords `fn`,
  `let`, `if`, `else`, `return`, `true` and `false` apart from plain
  identifiers.
- `crowlang.lexer`: `Lexer` turns source text into tokens, one at a time with
  `next_token()` or by iterating over it; `tokenize(source)` returns the whole
  list, ending with an `EOF` token. `==` and `!=` are read as single tokens;
  any character the language does not know becomes an `ILLEGAL` token.
- `crowlang.ast`: the syntax tree: `Program`, `LetStatement`,
  `ReturnStatement`, `ExpressionStatement`, `BlockStatement`, `Identifier`,
  `IntegerLiteral`, `BooleanExpression`, `PrefixExpression`,
  `InfixExpression`, `ConditionalExpression` and `CallExpression`. Each node
  has `token_literal()` and renders itself with `str()`; prefix and infix
  expressions render in prefix form such as `(- x)` and `(+ a (* b c))`,
  conditionals as `IF (a) THEN {...; } ELSE {...; }`.
- `crowlang.objects`: the runtime values `Integer`, `Boolean`, `Null` and
  `ReturnValue`, each with a `type` (an `ObjectType`) and `inspect()`.
- `crowlang.environment`: `Environment`, the name-to-value store used by the
  evaluator, with `get`, `set` and `in`.
- `crowlang.evaluator`: `evaluate(node, env)` walks a syntax tree and returns
  a runtime value; `is_truthy(value)` gives the language's notion of truth
  (`false` and null are false, everything else is true). `NULL`, `TRUE` and
  `FALSE` are the shared null and boolean values.
- `crowlang.logger`: a process-wide `Logger` obtained from `get_instance()`;
  `log(message)` records a message and `logs()` returns a copy of them, oldest
  first.

## Example

Tokenizing source text:

```python
from crowlang.lexer import tokenize

for token in tokenize("let five = 5;"):
    print(token.type, token.literal)
```

Evaluating a tree built by hand:

```python
from crowlang.ast import ExpressionStatement, InfixExpression, IntegerLiteral, Program
from crowlang.environment import Environment
from crowlang.evaluator import evaluate
from crowlang.tokens import Token, TokenType

two = IntegerLiteral(Token(TokenType.INT, "2"), 2)
five = IntegerLiteral(Token(TokenType.INT, "5"), 5)
product = InfixExpression(two, Token(TokenType.ASTERISK, "*"), five)
program = Program([ExpressionStatement(Token(TokenType.INT, "2"), product)])

print(evaluate(program, Environment()).inspect())  # 10
```

## Language notes

- Integer arithmetic supports `+`, `-`, `*` and `/` on signed 64-bit values,
  wrapping on overflow; division truncates toward zero, and division by zero
  raises `ZeroDivisionError`. Comparisons `<`, `>`, `==` and `!=` give
  booleans. Booleans compare with `==` and `!=`.
- `!` negates truth; `-` negates integers. Other combinations of operator and
  operand evaluate to null.
- An infix operator applied where an operand has no value (for instance an
  unbound name) raises `crowlang.evaluator.EvaluationError`. An unbound name
  on its own evaluates to `None`.
- A `let` binding does not overwrite a name that is already bound.
- An `if` whose condition is false and that has no `else` evaluates to null.
- `return` leaves the enclosing blocks and stops evaluation of the program.

## What the package does not do

The package has no parser: it reads source text into tokens, and it
evaluates syntax trees, but the trees have to be built by the caller. There
is no interactive prompt and no command to run. Call expressions can be
represented and rendered, but the evaluator does not evaluate them, and there
are no function values.

## Running the tests

```
pip install crowlang[test]
pytest
```