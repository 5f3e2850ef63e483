import io

from uforth.interpreter import Interpreter
from uforth.repl import main, repl, run_once
from uforth.types.primitive_op import PrimitiveOp


def test_single_shot(capsys):
    assert main(["1 2 + dup"]) == 0
    out = capsys.readouterr().out
    assert out == "3\n3\n"


def test_single_shot_error(capsys):
    assert main(["1 0 /"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: ")


def test_single_shot_flags(capsys):
    assert main(["--no-loop-check", "2 true { 1 - dup 0 > } loop"]) == 0
    assert capsys.readouterr().out == "0\n"


def test_interactive_session_keeps_state():
    inp = io.StringIO("5 x =\nx 2 *\n")
    out, err = io.StringIO(), io.StringIO()
    assert repl(Interpreter(), "> ", inp, out, err) == 0
    assert out.getvalue() == "> > 10\n> \n"
    assert err.getvalue() == ""


def test_interactive_session_survives_errors():
    inp = io.StringIO("1\n2 0 /\n2\n")
    out, err = io.StringIO(), io.StringIO()
    assert repl(Interpreter(), "> ", inp, out, err) == 0
    assert out.getvalue() == "> 1\n> > 2\n1\n> \n"
    assert "error:" in err.getvalue()


def interrupt(ctx, evaluate_fn):
    raise KeyboardInterrupt


def test_interrupt_keeps_session_going():
    interp = Interpreter()
    interp.env.define("halt", PrimitiveOp("halt", interrupt))
    inp = io.StringIO("1\n2 halt\n3\n")
    out, err = io.StringIO(), io.StringIO()
    assert repl(interp, "> ", inp, out, err) == 0
    assert out.getvalue() == "> 1\n> > 3\n1\n> \n"
    assert err.getvalue() == "error: interrupted\n"


def test_single_shot_interrupt():
    interp = Interpreter()
    interp.env.define("halt", PrimitiveOp("halt", interrupt))
    out, err = io.StringIO(), io.StringIO()
    assert run_once(interp, "1 halt", out, err) == 1
    assert out.getvalue() == ""
    assert err.getvalue() == "error: interrupted\n"
    assert interp.stack.to_list() == []
