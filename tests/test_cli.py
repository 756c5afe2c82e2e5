import pytest

from upoly.cli import main


def run(capsys, *argv):
    status = main(list(argv))
    out, err = capsys.readouterr()
    return status, out, err


def test_show(capsys):
    status, out, _ = run(capsys, 'show', '1,0,1')
    assert status == 0
    assert out == "x^2+1\ndegree 2\n"


def test_show_var(capsys):
    _, out, _ = run(capsys, '--var', 't', 'show', '0,2,0')
    assert out == "2*t\ndegree 1\n"


def test_eval(capsys):
    _, out, _ = run(capsys, 'eval', '1,2,1', '1/2')
    assert out == "9/4\n"


def test_eval_float(capsys):
    _, out, _ = run(capsys, '--ring', 'float', 'eval', '1,2,1', '0.5')
    assert out == "2.25\n"


def test_compose(capsys):
    _, out, _ = run(capsys, 'compose', '1,0,1', '1,1')
    assert out == "x^2+2*x+2\n"


def test_divmod(capsys):
    _, out, _ = run(capsys, 'divmod', '1,0,1', '1,1')
    assert out == "quotient: x-1\nremainder: 2\n"


def test_divmod_gf(capsys):
    # Over GF(2), x^2 + 1 = (x + 1)^2.
    _, out, _ = run(capsys, '--ring', 'gf:2', 'divmod', '1,0,1', '1,1')
    assert out == "quotient: x+1\nremainder: 0\n"


def test_divmod_by_zero(capsys):
    status, out, err = run(capsys, 'divmod', '1,1', '0,0')
    assert status == 1
    assert out == ""
    assert err == "upoly: polynomial division by zero\n"


def test_gcd(capsys):
    _, out, _ = run(capsys, 'gcd', '2,-3,1', '1,0,-1')
    assert out == "x-1\n"


def test_gcd_steps(capsys):
    _, out, _ = run(capsys, 'gcd', '1,0,1', '1,1', '--steps')
    lines = out.splitlines()
    assert lines[0].split() == ['step', 'dividend', 'divisor', 'quotient', 'remainder', 'degree']
    assert len(lines) == 4
    assert lines[-1] == "1"


@pytest.mark.parametrize("argv", [
    ['--ring', 'gf:4', 'show', '1'],
    ['--ring', 'complex', 'show', '1'],
    ['show', '1,x'],
    ['eval', '1,1', 'x'],
    ['divmod', '1'],
])
def test_bad_arguments(capsys, argv):
    with pytest.raises(SystemExit) as e:
        main(argv)
    assert e.value.code == 2
