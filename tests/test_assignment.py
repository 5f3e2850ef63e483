from uforth.types.symbol import Symbol


def test_first_write_wins(run):
    assert run("5 x = 7 x = x") == [5]


def test_assignment_consumes_both_values(run):
    assert run("1 5 x =") == [1]


def test_bound_integer_evaluates_to_itself(run):
    assert run("42 answer = answer answer +") == [84]


def test_bound_block_runs_through_its_name(run):
    assert run("{ 1 2 + } f = f") == [3]


def test_bound_boolean(run):
    assert run("true yes = yes") == [True]


def test_binding_inside_block_is_local(run):
    # y is bound in the block's child scope, which dies with the invocation
    assert run("{ 9 y = y } f = f y") == [Symbol("y"), 9]


def test_bound_name_evaluates_before_assignment(interp, run):
    # inside f, `a` resolves to 1 through the parent scope, so `2 1 =` binds "1"
    assert run("1 a = { 2 a = a } f = f a") == [1, 1]
    assert not interp.env.is_bound("1")


def test_blocks_are_dynamically_scoped(run):
    # g sees w through its caller h, not through where g was defined
    assert run("{ w } g = { 8 w = g } h = h") == [8]
    assert run("_ g") == [Symbol("w")]


def test_block_sees_bindings_made_after_its_definition(run):
    assert run("{ z } g = 4 z = g") == [4]


def test_name_is_the_rendered_top_value(interp, run):
    run("5 x =")
    # x evaluates to 5 before `=` runs, so this binds the name "5"
    run("7 x =")
    assert interp.env.lookup("5") == 7
    assert run("x") == [5]


def test_falsy_bound_values_resolve(run):
    assert run("0 zero = false no = zero no") == [False, 0]
