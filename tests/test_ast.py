from crowlang.ast import (
    BlockStatement,
    BooleanExpression,
    CallExpression,
    ConditionalExpression,
    ExpressionStatement,
    Identifier,
    InfixExpression,
    IntegerLiteral,
    LetStatement,
    PrefixExpression,
    Program,
    ReturnStatement,
)
from crowlang.tokens import Token, TokenType


def ident(name):
    return Identifier(Token(TokenType.IDENT, name), name)


def integer(value):
    return IntegerLiteral(Token(TokenType.INT, str(value)), value)


def infix(left, op_type, right):
    return InfixExpression(left, Token(op_type, op_type.value), right)


def boolean(value):
    kind = TokenType.TRUE if value else TokenType.FALSE
    return BooleanExpression(Token(kind, str(value).lower()), value)


def block(*statements):
    return BlockStatement(Token(TokenType.LBRACE, "{"), list(statements))


def let(name, value):
    return LetStatement(Token(TokenType.LET, "let"), ident(name), value)


def ret(value):
    return ReturnStatement(Token(TokenType.RETURN, "return"), value)


def cond(condition, then_block, else_block=None):
    return ConditionalExpression(Token(TokenType.IF, "if"), condition, then_block, else_block)


def expr_stmt(expression):
    return ExpressionStatement(Token(TokenType.IDENT, expression.token_literal()), expression)


def test_program_string():
    program = Program([let("myVar", ident("anotherVar"))])
    assert str(program) == "let myVar = anotherVar"


def test_program_token_literal():
    assert Program().token_literal() == ""
    assert Program([let("x", integer(5))]).token_literal() == "let"


def test_let_without_value():
    assert str(let("x", None)) == "let x = "


def test_return_statement_string():
    statement = ret(integer(5))
    assert str(statement) == "return 5"
    assert statement.token_literal() == "return"


def test_prefix_expression_string():
    minus = Token(TokenType.MINUS, "-")
    bang = Token(TokenType.BANG, "!")
    plus = Token(TokenType.PLUS, "+")
    expression = PrefixExpression(plus, PrefixExpression(minus, PrefixExpression(bang, ident("foobar"))))
    assert str(expression) == "(+ (- (! foobar)))"
    assert expression.token_literal() == str(expression)


def test_infix_precedence_string():
    left = infix(ident("foobar"), TokenType.PLUS, infix(ident("barfoo"), TokenType.ASTERISK, ident("grubbox")))
    right = infix(ident("grub"), TokenType.ASTERISK, infix(ident("chad"), TokenType.PLUS, ident("wick")))
    expression = infix(left, TokenType.MINUS, right)
    program = Program([expr_stmt(expression)])
    assert str(program) == "(- (+ foobar (* barfoo grubbox)) (* grub (+ chad wick)))"


def test_infix_token_literal():
    expression = infix(ident("foobar"), TokenType.PLUS, ident("barfoo"))
    assert expression.token_literal() == "foobar+barfoo"
    assert str(expression.left) == "foobar"
    assert str(expression.right) == "barfoo"


def test_boolean_strings():
    assert str(Program([expr_stmt(boolean(True))])) == "true"
    assert str(Program([expr_stmt(boolean(False))])) == "false"


def test_conditional_string():
    expression = cond(ident("a"), block(let("x", integer(5))), block(let("x", integer(6))))
    assert str(expr_stmt(expression)) == "IF (a) THEN {let x = 5; } ELSE {let x = 6; }"


def test_conditional_without_else():
    expression = cond(boolean(True), block(ret(integer(1))))
    assert str(expression) == "IF (true) THEN {return 1; }"


def test_nested_if_string():
    inner = cond(boolean(True), block(ret(integer(1))))
    outer = cond(boolean(True), block(expr_stmt(inner), ret(integer(2))))
    program = Program([expr_stmt(outer)])
    assert str(program) == "IF (true) THEN {IF (true) THEN {return 1; }; return 2; }"


def test_call_expression_string():
    call = CallExpression(
        Token(TokenType.LPAREN, "("),
        ident("call"),
        [ident("a"), ident("b"), ident("c")],
    )
    assert str(call) == "CALL call(a, b, c, )"
    assert call.token_literal() == "("


def test_expression_statement_without_expression():
    assert str(ExpressionStatement(Token(TokenType.SEMICOLON, ";"))) == ""


def test_empty_block_string():
    assert str(block()) == "{}"
    assert block().token_literal() == "{"