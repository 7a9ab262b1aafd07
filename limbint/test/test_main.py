import pytest

from limbint.__main__ import main, split_args, evaluate, UsageError
from limbint.bigint import get_config


def test_split_args():
    assert split_args(['--division-trace', '1', '+', '2']) == (
        ['--division-trace'], ['1', '+', '2'])
    assert split_args(['-5', '*', '3']) == ([], ['-5', '*', '3'])
    assert split_args(['--', '--1']) == ([], ['--1'])
    assert split_args([]) == ([], [])

def test_evaluate():
    assert evaluate(['42']) == 42
    assert evaluate(['-', '42']) == -42
    assert evaluate(['~', '0']) == -1
    assert evaluate(['7', '<<', '40']) == 7 << 40
    assert evaluate(['3', '<', '4']) is True
    with pytest.raises(UsageError):
        evaluate(['1', '2', '3', '4'])
    with pytest.raises(UsageError):
        evaluate(['!', '1'])

def test_division(capsys):
    assert main(['1000000000000000000000', '/',
                 '999999999999999999999']) == 0
    out, err = capsys.readouterr()
    assert out == '1\n'

def test_negative_operands(capsys):
    assert main(['-5', '*', '3']) == 0
    assert main(['--', '-7', '%', '3']) == 0
    assert main(['-2147483648', '>>', '31']) == 0
    out, err = capsys.readouterr()
    assert out == '-15\n-1\n-1\n'

def test_no_summary_without_trace(capsys):
    assert main(['100000000000000000000000', '/', '7000000000000']) == 0
    assert capsys.readouterr().err == ''

def test_comparison(capsys):
    assert main(['1', '<', '2']) == 0
    assert capsys.readouterr().out == 'True\n'

def test_division_by_zero(capsys):
    assert main(['5', '/', '0']) == 1
    out, err = capsys.readouterr()
    assert out == ''
    assert '[limbint:ERROR] bigint division or modulo by zero' in err

def test_invalid_format(capsys):
    assert main(['12x']) == 1
    err = capsys.readouterr().err
    assert "invalid character at pos 2: 'x'" in err

def test_negative_shift(capsys):
    assert main(['1', '<<', '-1']) == 1
    assert 'negative shift count' in capsys.readouterr().err

def test_usage_errors(capsys):
    for argv in [[], ['5', '?', '3'], ['1', '2', '3', '4'],
                 ['--no-such-option', '1']]:
        with pytest.raises(SystemExit) as excinfo:
            main(argv)
        assert excinfo.value.code == 2
    assert 'usage' in capsys.readouterr().err.lower()

def test_trace_option(capsys):
    assert main(['--division-trace', '100000000000000000000000', '/',
                 '7000000000000']) == 0
    out, err = capsys.readouterr()
    assert out == '%d\n' % (10**23 // 7000000000000,)
    assert '[divrem:debug] digit' in err
    assert '[limbint:info] ' in err
    assert 'quotient digit(s)' in err
    assert 'at most' in err

def test_karatsuba_option(capsys):
    a = 3**300
    b = 7**250
    assert main(['--mul-karatsuba', '--mul-karatsuba_cutoff=2',
                 str(a), '*', str(b)]) == 0
    assert capsys.readouterr().out == '%d\n' % (a * b,)

def test_config_restored():
    old = get_config()
    main(['--division-trace', '1', '+', '1'])
    assert get_config() is old
    assert not old.division.trace
