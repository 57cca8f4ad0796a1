import pytest

import main


def run(capsys, *argv):
    with pytest.raises(SystemExit) as exc:
        main.main(list(argv))
    out, err = capsys.readouterr()
    return exc.value.code, out, err


def test_help(capsys):
    code, out, _ = run(capsys, "-h")
    assert code == 0
    assert out.startswith(main.USAGE)
    assert "simple" in out


def test_default_rng(capsys):
    main.main(["-n", "1000"])
    out, _ = capsys.readouterr()
    assert "Doing 1000 iterations with the simple rng... done." in out
    assert "Estimation took" in out
    assert out.rstrip().endswith("pi ~ 3.176000")


def test_md5_rng(capsys):
    main.main(["-r", "md5", "-n", "100"])
    out, _ = capsys.readouterr()
    assert "with the md5 rng" in out
    assert "pi ~ " in out


def test_missing_iterations(capsys):
    code, out, err = run(capsys, "-r", "simple")
    assert code == 1
    assert "no number of iterations given" in err
    assert out == ""


@pytest.mark.parametrize("value", ["0", "-3", "abc"])
def test_invalid_iterations(capsys, value):
    code, _, err = run(capsys, "-n", value)
    assert code == 1
    assert "must be >0" in err


def test_unknown_rng(capsys):
    code, out, err = run(capsys, "-r", "bogus", "-n", "10")
    assert code == 1
    assert "unknown rng 'bogus'" in err
    assert "Doing" not in out


@pytest.mark.parametrize("argv", [["-x"], ["-n"]])
def test_bad_flags(capsys, argv):
    code, _, err = run(capsys, *argv)
    assert code == 1
    assert err
